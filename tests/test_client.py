"""Tests for the top-level client."""

import logging

import pytest

from drive_access import DriveAccessClient
from drive_access.config.constants import ResourceKind
from drive_access.config.settings import DriveAccessSettings
from drive_access.core.exceptions import ConfigurationError
from drive_access.transport import HttpxTransport


class TestDriveAccessClient:
    """Test client construction and resource factories."""

    def test_invalid_url_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DriveAccessClient(DriveAccessSettings(api_url="ftp://files.test.com", api_key="k"))

        assert "DRIVE_ACCESS_API_URL" in exc_info.value.message

    def test_missing_key_only_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="drive_access.client"):
            client = DriveAccessClient(DriveAccessSettings(api_url="https://api.test.com", api_key=""))

        assert isinstance(client.transport, HttpxTransport)
        assert any("API_KEY is empty" in record.getMessage() for record in caplog.records)

    def test_drive_shares_transport(self, settings, mock_transport):
        client = DriveAccessClient(settings, transport=mock_transport)

        drive = client.drive("123")

        assert drive.transport is mock_transport
        assert drive.access.uri == "/drive/123/access"

    def test_drive_item(self, settings, mock_transport):
        client = DriveAccessClient(settings, transport=mock_transport)

        item = client.drive_item("123", "456", item_type="FILE")

        assert item.access.uri == "/drive/123/item/456/access"
        assert item.access.resource_kind is ResourceKind.FILE

    def test_access_for_arbitrary_uri(self, settings, mock_transport):
        client = DriveAccessClient(settings, transport=mock_transport)

        assert client.access("/workspace/7").uri == "/workspace/7/access"

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, settings, mock_transport):
        async with DriveAccessClient(settings, transport=mock_transport) as client:
            mock_transport.get.return_value = {"accessors": []}
            await client.drive("1").access.list()

        mock_transport.close.assert_awaited_once()
