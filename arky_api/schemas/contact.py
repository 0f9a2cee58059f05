from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContactRequest(BaseModel):
    """Contact form submission as posted by the website (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    user_type: str | None = Field(default=None, alias="userType")
    message: str | None = None


class ContactResponse(BaseModel):
    success: bool
    message: str
