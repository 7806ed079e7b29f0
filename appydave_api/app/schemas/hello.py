"""Pydantic schema for the greeting endpoint."""

from pydantic import BaseModel


class HelloResponse(BaseModel):
    message: str
