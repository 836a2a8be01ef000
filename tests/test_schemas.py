"""
Tests for gift validation.
"""

from gift_list_api.app.schemas.gift import GiftItem, validate_gift, validate_patch


def _fields(result):
    return {error["field"] for error in result.errors}


class TestValidateGift:

    def test_valid_gift_defaults_purchased_to_false(self):
        result = validate_gift({"id": "1", "name": "Alice", "gift": "Book"})
        assert result.ok
        assert result.value.model_dump() == {"id": "1", "name": "Alice", "gift": "Book", "purchased": False}

    def test_purchased_is_kept_when_given(self):
        result = validate_gift({"id": "1", "name": "Alice", "gift": "Book", "purchased": True})
        assert result.value.purchased is True

    def test_unknown_fields_are_dropped(self):
        result = validate_gift({"id": "1", "name": "Alice", "gift": "Book", "price": 10})
        assert "price" not in result.value.model_dump()

    def test_empty_name_and_gift_are_rejected(self):
        result = validate_gift({"id": "1", "name": "", "gift": ""})
        assert not result.ok
        assert result.value is None
        assert _fields(result) == {"name", "gift"}
        assert all(error["code"] == "string_too_short" for error in result.errors)

    def test_missing_fields_are_rejected(self):
        result = validate_gift({})
        assert _fields(result) == {"id", "name", "gift"}

    def test_empty_id_is_rejected(self):
        result = validate_gift({"id": "", "name": "Alice", "gift": "Book"})
        assert _fields(result) == {"id"}

    def test_wrong_types_are_rejected(self):
        result = validate_gift({"id": 1, "name": "Alice", "gift": "Book", "purchased": "yes"})
        assert _fields(result) == {"id", "purchased"}

    def test_non_object_payload_is_rejected(self):
        assert not validate_gift(["id", "1"]).ok
        result = validate_gift(None)
        assert result.errors[0]["message"] == "Request body must be a JSON object"


class TestValidatePatch:

    def test_empty_patch_is_valid_and_has_no_changes(self):
        result = validate_patch({})
        assert result.ok
        assert result.value.changes() == {}

    def test_only_present_fields_are_changes(self):
        result = validate_patch({"purchased": True})
        assert result.value.changes() == {"purchased": True}

    def test_present_fields_use_add_constraints(self):
        result = validate_patch({"name": "", "purchased": "true"})
        assert _fields(result) == {"name", "purchased"}

    def test_explicit_null_is_rejected(self):
        result = validate_patch({"gift": None})
        assert _fields(result) == {"gift"}

    def test_id_is_never_a_change(self):
        result = validate_patch({"id": "other", "gift": "Pen"})
        assert result.ok
        assert result.value.changes() == {"gift": "Pen"}

    def test_apply_to_merges_over_existing_item(self):
        existing = GiftItem(id="1", name="Alice", gift="Book")
        patch = validate_patch({"id": "2", "purchased": True}).value
        merged = patch.apply_to(existing)
        assert merged == GiftItem(id="1", name="Alice", gift="Book", purchased=True)
        assert existing.purchased is False
