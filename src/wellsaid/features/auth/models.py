"""Pydantic models for the auth actions."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field


def _form_text(form: Mapping[str, Any], name: str) -> str | None:
    """Return a form field if it is plain text, otherwise None."""
    value = form.get(name)
    return value if isinstance(value, str) else None


class Credentials(BaseModel):
    """
    Email/password pair submitted by the signup form.

    Text fields are taken from the form as-is; a missing field, or a file
    upload posted under one of these names, becomes None and is left for the
    auth provider to reject.
    """

    email: str | None = None
    password: str | None = Field(None, repr=False)

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "Credentials":
        """Build credentials from submitted form fields."""
        return cls(email=_form_text(form, "email"), password=_form_text(form, "password"))


class Redirect(BaseModel):
    """
    Successful action outcome: navigate the browser to ``path``.

    ``session`` carries a provider-issued session for the HTTP layer to store;
    it is never serialized.
    """

    path: str
    session: Any | None = Field(None, exclude=True, repr=False)


class ActionFailure(BaseModel):
    """Recoverable action outcome carrying a message for direct display."""

    error: str


ActionResult = Redirect | ActionFailure


class OnboardingForm(BaseModel):
    """Profile details collected right after signup."""

    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    preferred_language: str = Field(min_length=1, max_length=16)
    hospital_phone: str = Field("", max_length=32)
    phone_extension: str = Field("", max_length=16)
