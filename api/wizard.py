from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Response

from dependencies import get_sessions, get_submission_client
from schemas.application import ClientContext, SubmitRequest
from schemas.form import StepDescriptor
from services.form_state import FormState, SubmissionNotAllowed, UnknownFieldError
from services.renderer import render_step
from services.sessions import SessionNotFound, SessionRegistry
from services.step_plan import STEP_PLAN
from services.submission import SubmissionClient
from utils.case import dict_keys_to_camel, to_camel_key, to_snake_key

router = APIRouter(prefix="/api/wizard", tags=["wizard"])

MSG_SESSION_NOT_FOUND = "Wizard session not found"


def _load(sessions: SessionRegistry, session_id: str) -> FormState:
    try:
        return sessions.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail=MSG_SESSION_NOT_FOUND) from None


def _view(session_id: str, state: FormState) -> dict[str, Any]:
    return render_step(state, session_id).model_dump(mode="json", by_alias=True)


def _step_to_response(step: StepDescriptor) -> dict[str, Any]:
    data = step.model_dump(by_alias=True, exclude_none=True)
    for field in data["fields"]:
        field["name"] = to_camel_key(field["name"])
        if "visibleWhen" in field:
            field["visibleWhen"] = dict_keys_to_camel(field["visibleWhen"])
    return data


@router.get("/plan")
async def get_plan():
    return [_step_to_response(step) for step in STEP_PLAN]


@router.post("", status_code=201)
async def create_session(sessions: SessionRegistry = Depends(get_sessions)):
    session_id, state = sessions.create()
    return _view(session_id, state)


@router.get("/{session_id}")
async def get_session(session_id: str, sessions: SessionRegistry = Depends(get_sessions)):
    return _view(session_id, _load(sessions, session_id))


@router.delete("/{session_id}", status_code=204)
async def discard_session(session_id: str, sessions: SessionRegistry = Depends(get_sessions)):
    try:
        sessions.discard(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail=MSG_SESSION_NOT_FOUND) from None
    return Response(status_code=204)


@router.patch("/{session_id}/fields")
async def update_fields(
    session_id: str,
    body: dict[str, Any] = Body(...),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Write one or more field values; keys may be camelCase or snake_case."""
    state = _load(sessions, session_id)
    try:
        state.set_fields({to_snake_key(key): value for key, value in body.items()})
    except UnknownFieldError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _view(session_id, state)


@router.post("/{session_id}/blur/{field_name}")
async def blur_field(session_id: str, field_name: str, sessions: SessionRegistry = Depends(get_sessions)):
    state = _load(sessions, session_id)
    try:
        state.blur(to_snake_key(field_name))
    except UnknownFieldError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _view(session_id, state)


@router.post("/{session_id}/next")
async def next_step(session_id: str, sessions: SessionRegistry = Depends(get_sessions)):
    state = _load(sessions, session_id)
    state.go_next()
    return _view(session_id, state)


@router.post("/{session_id}/prev")
async def previous_step(session_id: str, sessions: SessionRegistry = Depends(get_sessions)):
    state = _load(sessions, session_id)
    state.go_prev()
    return _view(session_id, state)


@router.post("/{session_id}/reset")
async def reset_session(session_id: str, sessions: SessionRegistry = Depends(get_sessions)):
    state = _load(sessions, session_id)
    state.reset()
    return _view(session_id, state)


@router.post("/{session_id}/submit")
async def submit_session(
    session_id: str,
    body: Optional[SubmitRequest] = Body(None),
    user_agent: Optional[str] = Header(None),
    sessions: SessionRegistry = Depends(get_sessions),
    client: SubmissionClient = Depends(get_submission_client),
):
    state = _load(sessions, session_id)
    context = ClientContext(page_url=body.page_url if body else None, user_agent=user_agent)
    try:
        await state.submit(client, context)
    except SubmissionNotAllowed as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _view(session_id, state)
