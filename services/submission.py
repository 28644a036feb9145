"""
Outbound delivery of a completed application to the lead collector webhook.
One POST per call, bounded by a timeout, never retried.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Optional

import httpx

from schemas.application import Application, ClientContext
from schemas.form import StepDescriptor
from services.step_plan import all_fields, visible_field_names

logger = logging.getLogger(__name__)

MSG_SUBMIT_FAILED = "Failed to submit application. Please try again."
MSG_UNEXPECTED = "An unexpected error occurred. Please try again."


@dataclass
class SubmissionResult:
    ok: bool
    status_code: Optional[int] = None
    message: str = ""


def build_payload(
    values: dict[str, Any],
    context: ClientContext | None = None,
    plan: list[StepDescriptor] | None = None,
) -> dict[str, Any]:
    """
    Wire payload: the camelCase Application record with hidden fields reset to their
    defaults, plus submittedAt and whatever client context is available.
    """
    defaults = Application().model_dump(by_alias=False)
    visible = visible_field_names(values, plan)
    record = {}
    for field in all_fields(plan):
        if field.name in visible:
            record[field.name] = values.get(field.name, defaults[field.name])
        else:
            record[field.name] = defaults[field.name]
    closing = record.get("closing_date")
    if isinstance(closing, str):
        record["closing_date"] = date.fromisoformat(closing) if closing.strip() else None

    payload = Application.model_validate(record).model_dump(mode="json", by_alias=True)
    payload["submittedAt"] = datetime.now(timezone.utc).isoformat()
    if context is not None:
        payload.update(context.model_dump(by_alias=True, exclude_none=True))
    return payload


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return MSG_SUBMIT_FAILED
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return MSG_SUBMIT_FAILED


class SubmissionClient:
    def __init__(
        self,
        webhook_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._transport = transport

    async def submit(
        self,
        values: dict[str, Any],
        context: ClientContext | None = None,
        plan: list[StepDescriptor] | None = None,
    ) -> SubmissionResult:
        try:
            payload = build_payload(values, context, plan)
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TimeoutException as exc:
            logger.warning("Application submission timed out after %ss: %s", self.timeout, exc)
            return SubmissionResult(ok=False, message=MSG_SUBMIT_FAILED)
        except httpx.HTTPError as exc:
            logger.warning("Application submission transport error: %s", exc)
            return SubmissionResult(ok=False, message=MSG_SUBMIT_FAILED)
        except Exception:
            logger.exception("Unexpected error submitting application")
            return SubmissionResult(ok=False, message=MSG_UNEXPECTED)

        if response.is_success:
            logger.info("Application submitted (status=%s)", response.status_code)
            return SubmissionResult(ok=True, status_code=response.status_code)

        logger.warning("Collector rejected application (status=%s)", response.status_code)
        return SubmissionResult(ok=False, status_code=response.status_code, message=_error_message(response))
