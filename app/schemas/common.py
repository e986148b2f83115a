"""Shared response envelopes."""
from pydantic import BaseModel


class SuccessSchema(BaseModel):
    success: bool = True


class MessageSchema(SuccessSchema):
    message: str


class ErrorSchema(BaseModel):
    error: str


class HealthSchema(BaseModel):
    status: str = "OK"
    message: str = "Server is running"
