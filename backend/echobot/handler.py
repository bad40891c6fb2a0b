"""Entry point for serverless function runtimes (Netlify / AWS Lambda proxy events)."""

import base64
import binascii
import logging
from typing import Any, Dict

from echobot.core.config import get_settings
from echobot.core.logging import configure_logging
from echobot.services.echo_service import handle_chat, response_headers, unexpected_failure

logger = logging.getLogger(__name__)


def _event_body(event: Dict[str, Any]):
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        return base64.b64decode(body, validate=True)
    return body


def handler(event: Dict[str, Any], _ctx: Any = None) -> Dict[str, Any]:
    configure_logging(get_settings().LOG_LEVEL)

    if (event.get("httpMethod") or "").upper() == "OPTIONS":
        return {"statusCode": 204, "headers": response_headers(), "body": ""}

    try:
        body = _event_body(event)
    except binascii.Error as exc:
        logger.exception("Could not decode base64 request body")
        result = unexpected_failure(exc)
    else:
        result = handle_chat(body)

    return {
        "statusCode": result.status_code,
        "headers": result.headers(),
        "body": result.render(),
    }
