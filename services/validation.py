"""
Field-level validation for the application wizard.
Rules come from the step plan's descriptors; hidden fields are skipped.
Produces {field_name: message}; a missing key means the field is valid. Never mutates values.
"""
from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional

from pydantic import BaseModel, EmailStr, TypeAdapter, ValidationError

from schemas.form import FieldDescriptor, StepDescriptor
from services.step_plan import all_fields, field_index

PHONE_RE = re.compile(r"^(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}$")

MSG_INVALID_EMAIL = "Invalid email address"
MSG_INVALID_PHONE = "Phone number is not valid"
MSG_INVALID_NUMBER = "Must be a valid number"
MSG_INVALID_OPTION = "Select a valid option"
MSG_INVALID_DATE = "Must be a valid date"

_email_adapter = TypeAdapter(EmailStr)


def parse_money(text: Any) -> Optional[Decimal]:
    """Numeric value of a display string such as "1,234,567"; None when it does not parse."""
    if text is None:
        return None
    cleaned = str(text).replace(",", "").strip()
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_date(value: Any) -> bool:
    if isinstance(value, date):
        return True
    try:
        date.fromisoformat(str(value).strip())
    except ValueError:
        return False
    return True


def check_field(field: FieldDescriptor, values: dict[str, Any]) -> Optional[str]:
    """First rule `field` violates against `values`, or None."""
    value = values.get(field.name)

    if field.kind == "checkbox":
        if field.required and value is not True:
            return field.required_message or f"{field.label} is required"
        return None

    if _is_blank(value):
        if field.required:
            return field.required_message or f"{field.label} is required"
        return None

    if field.kind == "date":
        return None if _is_date(value) else MSG_INVALID_DATE

    text = str(value).strip()
    if field.min_length and len(text) < field.min_length:
        return f"{field.label} must be at least {field.min_length} characters"
    if field.kind == "email":
        try:
            _email_adapter.validate_python(text)
        except ValidationError:
            return MSG_INVALID_EMAIL
    elif field.kind == "tel":
        if not PHONE_RE.match(text):
            return MSG_INVALID_PHONE
    elif field.kind == "money":
        if parse_money(text) is None:
            return MSG_INVALID_NUMBER
    if field.options is not None and text not in field.options:
        return MSG_INVALID_OPTION
    return None


def _as_values(values: dict[str, Any] | BaseModel) -> dict[str, Any]:
    if isinstance(values, BaseModel):
        return values.model_dump(by_alias=False)
    return values


def validate(
    values: dict[str, Any] | BaseModel,
    fields: Iterable[FieldDescriptor] | None = None,
    plan: list[StepDescriptor] | None = None,
) -> dict[str, str]:
    """
    Validate `fields` (default: the whole plan) against `values`.
    Fields hidden by their visibility condition are ignored.
    """
    values = _as_values(values)
    fields = all_fields(plan) if fields is None else fields
    errors: dict[str, str] = {}
    for field in fields:
        if not field.is_visible(values):
            continue
        message = check_field(field, values)
        if message:
            errors[field.name] = message
    return errors


def validate_field(
    name: str,
    values: dict[str, Any] | BaseModel,
    plan: list[StepDescriptor] | None = None,
) -> Optional[str]:
    """Validate a single field by name (blur). Raises KeyError for names outside the plan."""
    field = field_index(plan)[name]
    return validate(values, [field]).get(name)
