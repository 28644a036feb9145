"""
Declarative wizard descriptors and the views rendered from them.
The same descriptors drive rendering and validation, so option lists live in exactly one place.
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FieldKind = Literal["text", "email", "tel", "textarea", "select", "radio", "checkbox", "date", "money"]
SubmitStatus = Literal["idle", "submitting", "success", "error"]


class FieldDescriptor(BaseModel):
    """One input of the wizard: what it is, how it is constrained, and when it is shown."""
    name: str
    kind: FieldKind
    label: str
    required: bool = False
    required_message: Optional[str] = None
    min_length: Optional[int] = Field(None, ge=1)
    options: Optional[list[str]] = None
    placeholder: Optional[str] = None
    # Field is shown only when every listed field currently holds the listed value
    visible_when: Optional[dict[str, Any]] = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def is_visible(self, values: dict[str, Any]) -> bool:
        if not self.visible_when:
            return True
        return all(values.get(k) == v for k, v in self.visible_when.items())


class StepDescriptor(BaseModel):
    number: int = Field(..., ge=1)
    key: str
    title: str
    fields: list[FieldDescriptor]

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class FieldView(BaseModel):
    name: str
    kind: FieldKind
    label: str
    required: bool
    options: Optional[list[str]] = None
    placeholder: Optional[str] = None
    value: Any = None
    error: Optional[str] = None
    touched: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WizardView(BaseModel):
    """Everything a client needs to draw the current step."""
    session_id: Optional[str] = None
    step: int
    step_key: str
    total_steps: int
    title: str
    progress: int
    fields: list[FieldView]
    values: dict[str, Any]
    errors: dict[str, str]
    status: SubmitStatus
    error_message: str = ""
    can_submit: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
