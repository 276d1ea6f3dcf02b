"""Response bodies shared by all endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Recipe not found"])


class MessageResponse(BaseModel):
    message: str = Field(..., examples=["Recipe has been deleted"])
