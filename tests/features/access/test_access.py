"""Tests for the Access facade."""

import pytest

from drive_access.config.constants import AccessRole, ResourceKind
from drive_access.features.access import Access, RevokeAll, RoleGrant, normalize_accessor
from drive_access.transport import HttpxTransport


class TestAccessBinding:
    """Test URI and kind binding."""

    def test_access_suffix_is_appended(self, drive_access):
        assert drive_access.uri == "/drive/123/access"

    def test_default_uri_is_bare_access(self, mock_transport, settings):
        assert Access(transport=mock_transport, settings=settings).uri == "/access"

    def test_default_transport_is_httpx(self, settings):
        access = Access("/drive/1", settings=settings)
        assert isinstance(access._transport, HttpxTransport)

    def test_resource_kind_accepts_string(self, mock_transport, settings):
        access = Access("/drive/1", transport=mock_transport, resource_kind="file", settings=settings)
        assert access.resource_kind is ResourceKind.FILE

    def test_repr(self, mock_transport, settings):
        access = Access("/drive/1", transport=mock_transport, resource_kind=ResourceKind.DRIVE, settings=settings)
        assert repr(access) == "Access(uri='/drive/1/access', kind=drive)"
        assert "unknown" in repr(Access("/x", transport=mock_transport, settings=settings))


class TestAccessSubmit:
    """Test dispatch of prepared requests."""

    @pytest.mark.asyncio
    async def test_submit_dispatches_grant(self, drive_access, mock_transport):
        mock_transport.post.return_value = {"accessor_id": "u1", "role": "VIEWER"}

        await drive_access.submit(RoleGrant(accessor=normalize_accessor({"user": "u1"}), role=AccessRole.VIEWER))

        mock_transport.post.assert_awaited_once()
        mock_transport.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_submit_dispatches_revoke(self, drive_access, mock_transport):
        mock_transport.delete.return_value = {"revoked_count": 1}

        await drive_access.submit(RevokeAll(accessor=normalize_accessor({"user": "u1"})))

        mock_transport.delete.assert_awaited_once()
        mock_transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_submit_rejects_other_values(self, drive_access):
        with pytest.raises(TypeError, match="Unsupported access request"):
            await drive_access.submit({"role": "VIEWER"})

    @pytest.mark.asyncio
    async def test_engine_is_reusable(self, drive_access, mock_transport):
        mock_transport.post.return_value = {"accessor_id": "u1", "role": "VIEWER"}

        for user in ("u1", "u2", "u3"):
            await drive_access.grant_by_role({"user": user}, "VIEWER")

        assert mock_transport.post.await_count == 3
        assert {call.args[0] for call in mock_transport.post.await_args_list} == {"/drive/123/access"}
