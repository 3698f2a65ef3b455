"""Request and response bodies for the HTTP API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from route_sentinel.data import AssessmentContext, ChatTurn

GENERIC_ERROR = "Something went wrong"


class AssessRequest(BaseModel):
    """Body of ``POST /assess``."""

    route: str | None = None


class ChatTurnBody(BaseModel):
    """One prior turn as sent by the client."""

    role: Literal["user", "assistant"]
    content: str

    def to_turn(self) -> ChatTurn:
        return ChatTurn(role=self.role, content=self.content)


class ChatRequest(BaseModel):
    """Body of ``POST /chat``. The client keeps the whole conversation."""

    route: str = ""
    assessment: AssessmentContext | None = None
    history: list[ChatTurnBody] = Field(default_factory=list)
    user_message: str | None = Field(default=None, alias="userMessage")

    model_config = ConfigDict(populate_by_name=True)


class ChatResponse(BaseModel):
    """Body returned by ``POST /chat``."""

    reply: str


class ErrorResponse(BaseModel):
    """Body returned for every 4xx/5xx response."""

    error: str
