"""Tests for accessor normalization."""

import uuid

import pytest

from drive_access.core.exceptions import AccessValidationError
from drive_access.features.access import Accessor, AccessorBundle, normalize_accessor, resolve_identifier


class TestNormalizeAccessor:
    """Test normalization of each accessor kind."""

    @pytest.mark.parametrize("kind", ["user", "org_user", "agent", "client"])
    def test_string_id_passes_through(self, kind):
        """Raw string ids are sent unchanged."""
        bundle = normalize_accessor({kind: f"{kind}-123"})
        assert bundle.to_payload() == {kind: f"{kind}-123"}

    @pytest.mark.parametrize("kind", ["user", "org_user", "agent", "client"])
    def test_model_object_reduces_to_id(self, kind, make_model):
        """Model references are reduced to their id."""
        model = make_model(f"{kind}-456", name="Test")
        bundle = normalize_accessor(Accessor(**{kind: model}))
        assert bundle.to_payload() == {kind: f"{kind}-456"}

    def test_model_and_string_normalize_identically(self, make_model):
        by_model = normalize_accessor({"agent": make_model("agent-1")})
        by_id = normalize_accessor({"agent": "agent-1"})
        assert by_model == by_id

    def test_normalizing_twice_is_stable(self, make_model):
        accessor = Accessor(user="user-1", client=make_model("client-1"))
        assert normalize_accessor(accessor) == normalize_accessor(accessor)

    def test_multiple_kinds_are_normalized_independently(self, make_model):
        bundle = normalize_accessor({"user": "user-123", "agent": make_model("agent-456")})
        assert bundle.to_payload() == {"user": "user-123", "agent": "agent-456"}

    def test_empty_accessor_gives_empty_bundle(self):
        """Empty input is not rejected client-side."""
        bundle = normalize_accessor({})
        assert bundle.is_empty()
        assert bundle.to_payload() == {}

    def test_absent_kinds_are_not_null_filled(self):
        payload = normalize_accessor(Accessor(org_user="ou1")).to_payload()
        assert "user" not in payload
        assert "agent" not in payload
        assert "client" not in payload

    def test_empty_string_is_treated_as_absent(self):
        assert normalize_accessor({"user": "", "agent": "a1"}).to_payload() == {"agent": "a1"}

    def test_model_without_id_is_dropped(self, make_model):
        assert normalize_accessor({"user": make_model(None)}).is_empty()

    def test_mapping_value_uses_id_key(self):
        assert normalize_accessor({"client": {"id": "client-9", "name": "CLI"}}).client == "client-9"

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(AccessValidationError) as exc_info:
            normalize_accessor({"team": "t1"})
        assert "team" in exc_info.value.message


class TestResolveIdentifier:
    """Test resolution of single accessor values."""

    def test_uuid_value_is_its_own_id(self):
        value = uuid.UUID("123e4567-e89b-12d3-a456-426614174000")
        assert resolve_identifier(value) == "123e4567-e89b-12d3-a456-426614174000"

    def test_non_string_model_id_is_stringified(self, make_model):
        assert resolve_identifier(make_model(42)) == "42"


class TestAccessorBundle:
    def test_str_lists_populated_kinds(self):
        assert str(AccessorBundle(user="u1", agent="a1")) == "user=u1, agent=a1"
        assert str(AccessorBundle()) == "<empty>"
