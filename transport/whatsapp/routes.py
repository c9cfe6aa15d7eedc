"""
WhatsApp Send Endpoint

FastAPI router exposing POST /send.
Validates the body and hands off to the SendOrchestrator.
No auth. No retries. No idempotency.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .schemas import ErrorResponse, SendRequest, SendResponse
from .sender import SendError, SendOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["WhatsApp Transport"])


def get_sender(request: Request) -> SendOrchestrator:
    """Orchestrator injected at app creation (see main.create_app)."""
    return request.app.state.sender


def describe_validation_error(error: ValidationError) -> str:
    """One line per failing field, e.g. "jid: Field required"."""
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item.get("loc", ())) or "body"
        parts.append(f"{field}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post("/send", response_model=SendResponse)
async def send_message(
    request: Request,
    sender: SendOrchestrator = Depends(get_sender),
):
    """
    Send a text message.

    Expected payload:
    {"jid": "15551234567", "text": "hi"}

    Returns:
        200 {"status": "Message sent"}
        400 {"error": ...} on a missing, empty or malformed field
        500 {"error": ...} when the send fails or times out
    """

    # Step 1: Parse JSON
    try:
        body = await request.body()
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to bind JSON: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON payload")

    if not isinstance(payload, dict):
        logger.warning("Failed to bind JSON: body is not an object")
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object"
        )

    # Step 2: Validate fields
    try:
        send_request = SendRequest(**payload)
    except ValidationError as e:
        message = describe_validation_error(e)
        logger.warning(f"Failed to bind JSON: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    logger.info(
        f"Received request to send message to {send_request.jid} "
        f"({len(send_request.text)} chars)"
    )

    # Step 3: Send
    try:
        await sender.send(send_request.jid, send_request.text)
    except SendError as e:
        logger.error(f"Failed to send message: {e}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    logger.info("Message sent successfully")
    return SendResponse()
