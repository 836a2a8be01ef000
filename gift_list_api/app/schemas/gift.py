"""
Pydantic schemas for gift list entries.

A gift item pairs a recipient (``name``) with a gift description
(``gift``) and tracks whether it has been ``purchased``.  The ``id`` is
chosen by the client and never generated by the server.

``validate_gift`` and ``validate_patch`` wrap the models and return a
``ValidationResult`` holding either the parsed value or the list of
field violations, so callers never have to catch pydantic exceptions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError


class GiftItem(BaseModel):
    """A stored gift item."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr = Field(..., min_length=1, description="Client supplied identifier")
    name: StrictStr = Field(..., min_length=1, description="Recipient of the gift")
    gift: StrictStr = Field(..., min_length=1, description="Description of the gift")
    purchased: StrictBool = Field(False, description="Whether the gift has been bought")


class GiftCreate(GiftItem):
    """Schema for adding a new gift item.  ``purchased`` defaults to false."""


class GiftPatch(BaseModel):
    """Schema for updating an existing gift item.

    All fields are optional; only provided values will be applied.
    Presence is tracked by pydantic in ``model_fields_set`` so an
    omitted field is distinguishable from one that was sent.  An
    explicit ``null`` is rejected.  ``id`` is accepted for
    compatibility with clients that echo the whole record, but it is
    never applied to the stored item.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[StrictStr] = Field(None, min_length=1)
    name: Optional[StrictStr] = Field(None, min_length=1)
    gift: Optional[StrictStr] = Field(None, min_length=1)
    purchased: Optional[StrictBool] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null")
        return v

    def changes(self) -> Dict[str, Any]:
        """Return the mutable fields that were present in the request."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if key != "id"
        }

    def apply_to(self, item: GiftItem) -> GiftItem:
        """Merge this patch over ``item``; absent fields keep their value."""
        merged = item.model_dump()
        merged.update(self.changes())
        return GiftItem(**merged)


T = TypeVar("T")


@dataclass
class ValidationResult(Generic[T]):
    """Outcome of validating a request body."""

    value: Optional[T] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def _violations(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into ``{"field", "message", "code"}`` dicts."""
    violations = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        violations.append({"field": loc, "message": err.get("msg", ""), "code": err.get("type", "")})
    return violations


def _not_an_object(payload: Any) -> List[Dict[str, Any]]:
    if payload is None:
        message = "Request body must be a JSON object"
    else:
        message = f"Expected a JSON object, received {type(payload).__name__}"
    return [{
        "field": "",
        "message": message,
        "code": "model_type",
    }]


def validate_gift(payload: Any) -> ValidationResult[GiftCreate]:
    """Validate a full gift item as sent to the add operation."""
    if not isinstance(payload, dict):
        return ValidationResult(errors=_not_an_object(payload))
    try:
        return ValidationResult(value=GiftCreate.model_validate(payload))
    except PydanticValidationError as exc:
        return ValidationResult(errors=_violations(exc))


def validate_patch(payload: Any) -> ValidationResult[GiftPatch]:
    """Validate a partial gift item as sent to the update operation."""
    if not isinstance(payload, dict):
        return ValidationResult(errors=_not_an_object(payload))
    try:
        return ValidationResult(value=GiftPatch.model_validate(payload))
    except PydanticValidationError as exc:
        return ValidationResult(errors=_violations(exc))
