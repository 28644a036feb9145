import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from dependencies import get_echo_store
from schemas.application import EchoAck
from services.echo import EchoStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["submissions"])


@router.post("/submitForm", status_code=201, response_model=EchoAck, response_model_by_alias=True)
async def submit_form(body: dict[str, Any] = Body(...), store: EchoStore = Depends(get_echo_store)):
    """Local stand-in for the collector webhook. Trusts the client; no schema validation."""
    try:
        submission_id = store.add(body)
    except Exception:
        logger.exception("Error processing form submission")
        ack = EchoAck(success=False, message="An error occurred while processing your submission")
        return JSONResponse(status_code=500, content=ack.model_dump(by_alias=True, exclude_none=True))
    return EchoAck(success=True, message="Form submitted successfully", submission_id=submission_id)
