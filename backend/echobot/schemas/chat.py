from pydantic import BaseModel, Field, StrictStr, field_validator

class ChatRequest(BaseModel):
    message: StrictStr = Field(..., description="User message to echo back")

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        # Trim only for the check; the original text is what gets echoed.
        if not value.strip():
            raise ValueError("message must not be blank")
        return value

class ChatResponse(BaseModel):
    reply: str = Field(..., description="Echoed reply text")

class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error category")
    details: str = Field(..., description="Further context about the failure")
