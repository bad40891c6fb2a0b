"""
Echo service: validates a chat payload and builds the EchoBot reply.

`handle_chat` never raises. Every outcome comes back as a ChatResult:
    ChatSuccess: 200, {"reply": ...}
    ChatFailure: 400 (bad payload) or 500 (anything else)
"""

import json
import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from echobot.schemas.chat import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

REPLY_TEMPLATE = 'You said: "{message}" (Echoed from EchoBot backend!)'

INVALID_REQUEST_ERROR = (
    "Invalid request format. 'message' field is required and must be a non-empty string."
)
INVALID_REQUEST_DETAILS = (
    "The request body must be a JSON object with a 'message' string field, "
    'e.g., { "message": "Hello!" }'
)
UNEXPECTED_ERROR = "An unexpected error occurred on the server."
NO_ERROR_DETAILS = "No specific error message available."

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

RawBody = Union[bytes, str, None]


# ─── Result variants ─────────────────────────────────────────────

class _ChatResult:
    __slots__ = ()

    status_code: int

    def body(self) -> Dict[str, Any]:
        raise NotImplementedError

    def headers(self) -> Dict[str, str]:
        return response_headers()

    def render(self) -> str:
        """Serialized body. ASCII-escaped, so any str the request carried can be encoded."""
        return json.dumps(self.body())


class ChatSuccess(_ChatResult):
    """Successful echo."""

    __slots__ = ("reply",)

    status_code = 200

    def __init__(self, reply: str):
        self.reply = reply

    def body(self) -> Dict[str, Any]:
        return ChatResponse(reply=self.reply).model_dump()


class ChatFailure(_ChatResult):
    """Rejected or failed request, carrying its own status code."""

    __slots__ = ("status_code", "error", "details")

    def __init__(self, status_code: int, error: str, details: str):
        self.status_code = status_code
        self.error = error
        self.details = details

    def body(self) -> Dict[str, Any]:
        return ErrorResponse(error=self.error, details=self.details).model_dump()


ChatResult = Union[ChatSuccess, ChatFailure]


def response_headers() -> Dict[str, str]:
    return {"Content-Type": "application/json", **CORS_HEADERS}


# ─── Core ────────────────────────────────────────────────────────

def build_reply(message: str) -> str:
    return REPLY_TEMPLATE.format(message=message)


def parse_body(raw_body: RawBody) -> Any:
    """Decode a JSON body. An empty body reads as an empty object."""
    if raw_body is None:
        return {}
    if isinstance(raw_body, bytes):
        raw_body = raw_body.decode("utf-8")
    if not raw_body.strip():
        return {}
    return json.loads(raw_body)


def handle_chat(raw_body: RawBody) -> ChatResult:
    """Run one chat request end to end and return its result."""
    try:
        payload = parse_body(raw_body)
        logger.info("Received request body: %r", payload)

        try:
            request = ChatRequest.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Validation error: %s", exc.errors(include_url=False))
            return ChatFailure(400, INVALID_REQUEST_ERROR, INVALID_REQUEST_DETAILS)

        reply = build_reply(request.message)
        logger.info('Successfully processed message: "%s"', request.message)
        logger.info('Sending reply: "%s"', reply)
        return ChatSuccess(reply)

    except Exception as exc:
        logger.exception("Internal server error during chat processing")
        return unexpected_failure(exc)


def unexpected_failure(exc: Exception) -> ChatFailure:
    return ChatFailure(500, UNEXPECTED_ERROR, str(exc) or NO_ERROR_DETAILS)
