from fastapi import APIRouter, Request, Response
from echobot.schemas.chat import ChatResponse, ErrorResponse
from echobot.services.echo_service import handle_chat

router = APIRouter()

@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat_endpoint(request: Request):
    """
    Chat endpoint for EchoBot.
    Accepts {"message": "..."} and echoes it back inside a fixed reply.

    The raw body is handed to the echo service as-is, so malformed JSON
    comes back as a 500 with details rather than FastAPI's 422.
    """
    result = handle_chat(await request.body())
    return Response(
        content=result.render(),
        status_code=result.status_code,
        headers=result.headers(),
        media_type="application/json",
    )
