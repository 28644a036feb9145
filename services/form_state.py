"""
Form state store for the application wizard: values, current step, touched/error state
and the submission lifecycle (idle -> submitting -> success | error).
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional

from schemas.application import Application, ClientContext
from schemas.form import FieldDescriptor, StepDescriptor, SubmitStatus
from services.step_plan import STEP_PLAN, all_fields, field_index, visible_field_names, visible_fields
from services.submission import MSG_UNEXPECTED, SubmissionClient
from services.validation import validate, validate_field

logger = logging.getLogger(__name__)


class WizardError(Exception):
    """Base class for invalid wizard operations."""


class UnknownFieldError(WizardError):
    def __init__(self, name: str):
        super().__init__(f"Unknown field: {name}")
        self.name = name


class SubmissionNotAllowed(WizardError):
    pass


_TRUTHY = {"true", "1", "on", "yes"}


def _coerce(field: FieldDescriptor, value: Any) -> Any:
    if field.kind == "checkbox":
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)
    if field.kind == "date":
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value).strip())
        except ValueError:
            # Kept as typed so validation can flag it
            return str(value)
    return "" if value is None else str(value)


def initial_values(plan: list[StepDescriptor] | None = None) -> dict[str, Any]:
    defaults = Application().model_dump(by_alias=False)
    return {f.name: defaults.get(f.name) for f in all_fields(plan)}


class FormState:
    def __init__(self, plan: list[StepDescriptor] | None = None):
        self.plan = STEP_PLAN if plan is None else plan
        self._fields = field_index(self.plan)
        self.values: dict[str, Any] = initial_values(self.plan)
        self.step = 1
        self.touched: set[str] = set()
        self.errors: dict[str, str] = {}
        self.status: SubmitStatus = "idle"
        self.error_message = ""

    @property
    def total_steps(self) -> int:
        return len(self.plan)

    @property
    def is_last_step(self) -> bool:
        return self.step == self.total_steps

    @property
    def can_submit(self) -> bool:
        """Submit control is enabled only on the final page and never while a submission is in flight."""
        return self.is_last_step and self.status != "submitting"

    def field(self, name: str) -> FieldDescriptor:
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def set_field(self, name: str, value: Any) -> None:
        field = self.field(name)
        self.values[name] = _coerce(field, value)

        visible = visible_field_names(self.values, self.plan)
        for hidden in [n for n in self.errors if n not in visible]:
            del self.errors[hidden]
        if name in self.errors:
            self._refresh_error(field)

    def set_fields(self, updates: dict[str, Any]) -> None:
        """Apply several updates; nothing is written unless every name is known."""
        for name in updates:
            self.field(name)
        for name, value in updates.items():
            self.set_field(name, value)

    def blur(self, name: str) -> Optional[str]:
        field = self.field(name)
        self.touched.add(name)
        return self._refresh_error(field)

    def _refresh_error(self, field: FieldDescriptor) -> Optional[str]:
        message = validate_field(field.name, self.values, self.plan)
        if message:
            self.errors[field.name] = message
        else:
            self.errors.pop(field.name, None)
        return message

    def go_next(self) -> bool:
        """Advance one page if every field visible on the current page is valid."""
        fields = visible_fields(self.step, self.values, self.plan)
        names = {f.name for f in fields}
        step_errors = validate(self.values, fields)
        self.touched |= names
        for name in names:
            self.errors.pop(name, None)
        self.errors.update(step_errors)
        if step_errors:
            logger.debug("Step %s blocked by %s", self.step, sorted(step_errors))
            return False
        if self.step < self.total_steps:
            self.step += 1
        return True

    def go_prev(self) -> None:
        self.step = max(1, self.step - 1)

    def reset(self) -> None:
        self.values = initial_values(self.plan)
        self.step = 1
        self.touched = set()
        self.errors = {}
        self.status = "idle"
        self.error_message = ""

    async def submit(self, client: SubmissionClient, context: ClientContext | None = None) -> bool:
        """
        Validate the whole record and hand it to the submission client.
        Returns True on a successful submission. A call made while another one
        is in flight is ignored without touching the network.
        """
        if self.status == "submitting":
            logger.info("Submission already in progress; ignoring duplicate submit")
            return False
        if not self.is_last_step:
            raise SubmissionNotAllowed(f"Submission is only available on step {self.total_steps}")

        self.errors = validate(self.values, plan=self.plan)
        if self.errors:
            self.touched |= set(self.errors)
            if self.status == "error":
                self.status = "idle"
                self.error_message = ""
            return False

        self.status = "submitting"
        self.error_message = ""
        result = None
        try:
            result = await client.submit(dict(self.values), context, self.plan)
        finally:
            if result is None:
                self.status = "error"
                self.error_message = MSG_UNEXPECTED

        if result.ok:
            self.reset()
            self.status = "success"
            return True
        self.status = "error"
        self.error_message = result.message or MSG_UNEXPECTED
        return False
