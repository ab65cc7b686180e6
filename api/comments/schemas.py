"""
Comment request schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr, field_validator


class NewComment(BaseModel):
    username: StrictStr = Field(..., min_length=1)
    body: StrictStr = Field(..., min_length=1)

    @field_validator("username", "body")
    @classmethod
    def _no_nul(cls, value: str) -> str:
        # PostgreSQL text columns cannot store NUL.
        if "\x00" in value:
            raise ValueError("NUL characters are not allowed")
        return value
