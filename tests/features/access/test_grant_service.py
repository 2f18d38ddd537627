"""Tests for role-based and legacy action-based grants."""

import pytest
from pydantic import ValidationError

from drive_access.config.constants import AccessAction, AccessRole, ResourceKind
from drive_access.core.exceptions import (
    AccessValidationError,
    ApiError,
    DriveAccessError,
    InvalidActionError,
    InvalidResponseError,
    InvalidRoleError,
    RoleNotAllowedError,
)
from drive_access.features.access import (
    Access,
    ActionGrant,
    GrantOptions,
    GrantResult,
    GrantService,
    LegacyGrantResult,
    RoleGrant,
    normalize_accessor,
)


def permission_result(action, success=True, permission_id=None):
    result = {"action": action, "success": success}
    if success:
        result["permission"] = {"id": permission_id or f"perm-{action}", "active": True}
    else:
        result["error"] = f"could not grant {action}"
    return result


class TestGrantByRole:
    """Test role-based grants on a drive."""

    @pytest.mark.asyncio
    async def test_grant_editor_on_drive(self, drive_access, mock_transport):
        """One POST to the access URI with the normalized accessor and the role."""
        mock_transport.post.return_value = {
            "data": {
                "drive_id": "123",
                "accessor_id": "orguser123",
                "role": "EDITOR",
                "permissions": [
                    permission_result("read"),
                    permission_result("update"),
                    permission_result("delete"),
                ],
            }
        }

        result = await drive_access.grant_by_role({"org_user": "orguser123"}, "EDITOR")

        mock_transport.post.assert_awaited_once_with(
            "/drive/123/access",
            {"accessor": {"org_user": "orguser123"}, "role": "EDITOR"},
        )
        assert isinstance(result, GrantResult)
        assert result.role == "EDITOR"
        assert {p.action for p in result.permissions} == {"read", "update", "delete"}
        assert result.failed_results == []

    @pytest.mark.asyncio
    async def test_options_omitted_when_not_supplied(self, drive_access, mock_transport):
        mock_transport.post.return_value = {"accessor_id": "u1", "role": "VIEWER"}

        await drive_access.grant_by_role({"user": "u1"}, AccessRole.VIEWER)

        body = mock_transport.post.await_args.args[1]
        assert "options" not in body

    @pytest.mark.asyncio
    async def test_cascade_options_forwarded(self, drive_access, mock_transport):
        mock_transport.post.return_value = {
            "data": {
                "drive_id": "123",
                "accessor_id": "orguser123",
                "role": "MANAGER",
                "drive_permissions": [permission_result("*")],
                "cascaded_items": {"total": 3, "granted": 2, "failed": 1, "items": [{"item_id": "i3"}]},
            }
        }

        result = await drive_access.grant_by_role(
            {"org_user": "orguser123"}, "MANAGER", {"cascade_to_items": True}
        )

        body = mock_transport.post.await_args.args[1]
        assert body["options"] == {"cascade_to_items": True}
        assert result.cascaded_items.has_failures
        assert result.cascaded_items.items[0].item_id == "i3"

    @pytest.mark.asyncio
    async def test_lowercase_role_is_sent_uppercase(self, drive_access, mock_transport):
        mock_transport.post.return_value = {"accessor_id": "a1", "role": "CONTRIBUTOR"}

        await drive_access.grant_by_role({"agent": "a1"}, "contributor")

        assert mock_transport.post.await_args.args[1]["role"] == "CONTRIBUTOR"

    @pytest.mark.asyncio
    async def test_model_accessor_is_reduced_to_id(self, drive_access, mock_transport, make_model):
        mock_transport.post.return_value = {"accessor_id": "agent-456", "role": "VIEWER"}

        await drive_access.grant_by_role({"agent": make_model("agent-456", name="Bot")}, "VIEWER")

        assert mock_transport.post.await_args.args[1]["accessor"] == {"agent": "agent-456"}

    @pytest.mark.asyncio
    async def test_bare_response_is_used_as_payload(self, drive_access, mock_transport):
        """Responses without a ``data`` envelope are taken as the result itself."""
        mock_transport.post.return_value = {"accessor_id": "u1", "role": "VIEWER", "drive_id": "123"}

        result = await drive_access.grant_by_role({"user": "u1"}, "VIEWER")

        assert result.drive_id == "123"

    @pytest.mark.asyncio
    async def test_unknown_role_rejected_before_sending(self, drive_access, mock_transport):
        with pytest.raises(InvalidRoleError):
            await drive_access.grant_by_role({"user": "u1"}, "OWNER")

        mock_transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_accessor_is_sent(self, drive_access, mock_transport):
        mock_transport.post.side_effect = ApiError("Accessor is required", status=400)

        with pytest.raises(ApiError) as exc_info:
            await drive_access.grant_by_role({}, "VIEWER")

        assert mock_transport.post.await_args.args[1]["accessor"] == {}
        assert exc_info.value.message == "Accessor is required"


class TestGrantOnItems:
    """Test role grants on files and directories."""

    @pytest.fixture
    def file_access(self, mock_transport, settings):
        return Access(
            "/drive/123/item/file-1",
            transport=mock_transport,
            resource_kind=ResourceKind.FILE,
            settings=settings,
        )

    @pytest.mark.asyncio
    async def test_contributor_on_file_rejected_before_sending(self, file_access, mock_transport):
        with pytest.raises(RoleNotAllowedError) as exc_info:
            await file_access.grant_by_role({"user": "u1"}, "CONTRIBUTOR")

        assert exc_info.value.message == "Role CONTRIBUTOR is not allowed on a file"
        mock_transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_legality_check_can_be_disabled(self, mock_transport, settings):
        """With the check off the server decides; its rejection surfaces verbatim."""
        lenient = settings.model_copy(update={"check_role_legality": False})
        access = Access(
            "/drive/123/item/file-1",
            transport=mock_transport,
            resource_kind=ResourceKind.FILE,
            settings=lenient,
        )
        mock_transport.post.side_effect = ApiError("Role CONTRIBUTOR is not valid for files", status=400)

        with pytest.raises(ApiError, match="not valid for files"):
            await access.grant_by_role({"user": "u1"}, "CONTRIBUTOR")

        mock_transport.post.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_kind_skips_legality_check(self, mock_transport, settings):
        access = Access("/drive/123/item/x", transport=mock_transport, settings=settings)
        mock_transport.post.return_value = {"accessor_id": "u1", "role": "CONTRIBUTOR"}

        result = await access.grant_by_role({"user": "u1"}, "CONTRIBUTOR")

        assert result.role == "CONTRIBUTOR"

    @pytest.mark.asyncio
    async def test_path_mode_grant(self, file_access, mock_transport):
        mock_transport.post.return_value = {
            "data": {
                "drive_id": "123",
                "item_id": "file-1",
                "accessor_id": "u1",
                "role": "EDITOR",
                "folder_permissions": [
                    {
                        "folder_id": "folder-1",
                        "folder_name": "Reports",
                        "level": 1,
                        "permissions": [permission_result("read")],
                    }
                ],
                "target_permissions": [
                    permission_result("read"),
                    permission_result("update"),
                    permission_result("delete", success=False),
                ],
            }
        }

        result = await file_access.grant_by_role(
            {"user": "u1"}, "EDITOR", {"mode": "path", "folder_role": "viewer"}
        )

        assert mock_transport.post.await_args.args == (
            "/drive/123/item/file-1/access",
            {
                "accessor": {"user": "u1"},
                "role": "EDITOR",
                "options": {"mode": "path", "folder_role": "VIEWER"},
            },
        )
        assert result.folder_permissions[0].folder_name == "Reports"
        assert result.target_permissions is not None
        assert result.nested_items is None
        assert [r.action for r in result.failed_results] == ["delete"]

    @pytest.mark.asyncio
    async def test_recursive_mode_grant(self, mock_transport, settings):
        folder_access = Access(
            "/drive/123/item/folder-1",
            transport=mock_transport,
            resource_kind=ResourceKind.DIRECTORY,
            settings=settings,
        )
        mock_transport.post.return_value = {
            "accessor_id": "u1",
            "role": "CONTRIBUTOR",
            "target_permissions": [permission_result("create")],
            "nested_items": {"total": 4, "granted": 4, "failed": 0},
        }

        result = await folder_access.grant_by_role(
            {"user": "u1"},
            "CONTRIBUTOR",
            GrantOptions(mode="recursive", item_role="EDITOR"),
        )

        assert mock_transport.post.await_args.args[1]["options"] == {
            "mode": "recursive",
            "item_role": "EDITOR",
        }
        assert not result.nested_items.has_failures


class TestLegacyGrant:
    """Test the deprecated action-based grant."""

    @pytest.mark.asyncio
    async def test_grant_action(self, drive_access, mock_transport):
        mock_transport.post.return_value = {
            "data": {
                "permission": {"id": "perm-1"},
                "drive_id": "123",
                "accessor_id": "u1",
                "action": "read",
            }
        }

        with pytest.warns(DeprecationWarning):
            result = await drive_access.grant({"user": "u1"}, "read")

        mock_transport.post.assert_awaited_once_with(
            "/drive/123/access",
            {"accessor": {"user": "u1"}, "action": "read"},
        )
        assert isinstance(result, LegacyGrantResult)
        assert result.action == "read"

    @pytest.mark.asyncio
    async def test_unknown_action_rejected(self, drive_access, mock_transport):
        with pytest.warns(DeprecationWarning):
            with pytest.raises(InvalidActionError):
                await drive_access.grant({"user": "u1"}, "execute")

        mock_transport.post.assert_not_awaited()


class TestGrantFailures:
    """Test failure normalization on grants."""

    @pytest.mark.asyncio
    async def test_structured_error_propagates_unchanged(self, drive_access, mock_transport):
        error = ApiError("Forbidden", status=403)
        mock_transport.post.side_effect = error

        with pytest.raises(ApiError) as exc_info:
            await drive_access.grant_by_role({"user": "u1"}, "VIEWER")

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_message_less_error_becomes_unknown_error(self, drive_access, mock_transport):
        mock_transport.post.side_effect = Exception()

        with pytest.raises(DriveAccessError) as exc_info:
            await drive_access.grant_by_role({"user": "u1"}, "VIEWER")

        assert exc_info.value.message == "Unknown error occurred"
        assert isinstance(exc_info.value.__cause__, Exception)

    @pytest.mark.asyncio
    async def test_plain_exception_message_is_kept(self, drive_access, mock_transport):
        mock_transport.post.side_effect = RuntimeError("connection reset")

        with pytest.raises(RuntimeError, match="connection reset"):
            await drive_access.grant_by_role({"user": "u1"}, "VIEWER")


class TestGrantServiceSubmit:
    """Test submitting prepared grant requests."""

    @pytest.fixture
    def service(self, mock_transport, settings):
        return GrantService("/drive/9/access", transport=mock_transport, settings=settings)

    @pytest.mark.asyncio
    async def test_submit_role_grant(self, service, mock_transport):
        mock_transport.post.return_value = {"accessor_id": "c1", "role": "VIEWER"}
        request = RoleGrant(accessor=normalize_accessor({"client": "c1"}), role=AccessRole.VIEWER)

        result = await service.submit(request)

        mock_transport.post.assert_awaited_once_with(
            "/drive/9/access", {"accessor": {"client": "c1"}, "role": "VIEWER"}
        )
        assert isinstance(result, GrantResult)

    @pytest.mark.asyncio
    async def test_submit_action_grant(self, service, mock_transport):
        mock_transport.post.return_value = {"accessor_id": "c1", "action": "delete"}
        request = ActionGrant(accessor=normalize_accessor({"client": "c1"}), action=AccessAction.DELETE)

        result = await service.submit(request)

        assert isinstance(result, LegacyGrantResult)

    @pytest.mark.asyncio
    async def test_submit_rejects_unknown_request(self, service):
        with pytest.raises(TypeError):
            await service.submit(object())

    @pytest.mark.asyncio
    async def test_empty_options_sent_as_empty_object(self, service, mock_transport):
        mock_transport.post.return_value = {"accessor_id": "c1", "role": "VIEWER"}

        await service.grant_by_role({"client": "c1"}, "VIEWER", {})

        assert mock_transport.post.await_args.args[1]["options"] == {}

    @pytest.mark.asyncio
    async def test_unknown_option_keys_are_forwarded(self, service, mock_transport):
        mock_transport.post.return_value = {"accessor_id": "c1", "role": "VIEWER"}

        await service.grant_by_role({"client": "c1"}, "VIEWER", {"notify": False})

        assert mock_transport.post.await_args.args[1]["options"] == {"notify": False}


class TestGrantValidation:
    """Test rejection of bad options and malformed grant responses."""

    @pytest.mark.asyncio
    async def test_unknown_folder_role_rejected_before_sending(self, drive_access, mock_transport):
        with pytest.raises(InvalidRoleError) as exc_info:
            await drive_access.grant_by_role({"user": "u1"}, "EDITOR", {"mode": "path", "folder_role": "OWNER"})

        assert exc_info.value.message == "Invalid grant options: folder_role"
        assert isinstance(exc_info.value.__cause__, ValidationError)
        mock_transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_mode_rejected_before_sending(self, drive_access, mock_transport):
        with pytest.raises(AccessValidationError) as exc_info:
            await drive_access.grant_by_role({"user": "u1"}, "EDITOR", {"mode": "sideways"})

        assert not isinstance(exc_info.value, InvalidRoleError)
        assert exc_info.value.details["errors"][0]["loc"] == ("mode",)
        mock_transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_text_response_raises_invalid_response(self, drive_access, mock_transport):
        mock_transport.post.return_value = "OK"

        with pytest.raises(InvalidResponseError):
            await drive_access.grant_by_role({"user": "u1"}, "VIEWER")

    @pytest.mark.asyncio
    async def test_legacy_grant_missing_fields_raises_invalid_response(self, drive_access, mock_transport):
        mock_transport.post.return_value = {"data": {"permission": {"id": "p1"}}}

        with pytest.warns(DeprecationWarning):
            with pytest.raises(InvalidResponseError):
                await drive_access.grant({"user": "u1"}, "read")
