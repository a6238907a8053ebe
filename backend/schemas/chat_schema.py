from typing import List, Literal
from pydantic import BaseModel, Field, constr, field_validator

class ChatMessage(BaseModel):
    role: Literal["user", "model"]
    content: str

class ChatRequest(BaseModel):
    session_id: constr(min_length=1, max_length=64)
    messages: List[ChatMessage] = Field(min_length=1)

    @field_validator("messages")
    @classmethod
    def last_turn_is_user(cls, messages: List[ChatMessage]) -> List[ChatMessage]:
        if messages[-1].role != "user":
            raise ValueError("the last message must come from the user")
        return messages

class ChatResponse(BaseModel):
    reply: str

class ChatResetResponse(BaseModel):
    dropped: bool
