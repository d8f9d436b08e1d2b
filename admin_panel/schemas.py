"""
Pydantic schemas for request bodies.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

RESERVED_NEWS_KEYS = ("_id", "id", "createdAt", "created_at")


class LoginPayload(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class StoererPayload(BaseModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    isActive: Optional[bool] = None


class NewsPayload(BaseModel):
    """
    A news item or a partial update of one. Only `display` is typed, every
    other field is passed through to the document as-is.
    """

    model_config = ConfigDict(extra="ignore")

    display: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def _check_keys(cls, data):
        if not isinstance(data, dict):
            raise ValueError("news item must be a JSON object")
        for key in data:
            if key.startswith("$") or "." in key:
                raise ValueError(f"invalid field name: {key}")
        return {k: v for k, v in data.items() if k not in RESERVED_NEWS_KEYS}

    @classmethod
    def clean(cls, data) -> dict:
        """
        Validate and return the submitted fields only, so partial updates
        leave the rest untouched. Untyped fields are kept exactly as sent.
        """
        payload = cls.model_validate(data)
        fields = {k: v for k, v in data.items() if k not in RESERVED_NEWS_KEYS}
        if "display" in fields:
            fields["display"] = payload.display
        return fields
