"""Pydantic models for API requests."""
from pydantic import AliasChoices, BaseModel, Field, model_validator


class TherapyRequest(BaseModel):
    """Therapy request model.

    Accepts both ``{"prompt": {"tech": ..., "mode": ...}}`` (what the
    completion hook sends) and the flat ``{"tech": ..., "mode": ...}``.
    ``mode`` stays a plain string so unknown values reach the route and get
    the plain-text 400 instead of a validation error.
    """
    tech: str = Field(validation_alias=AliasChoices("tech", "technology"))
    mode: str

    @model_validator(mode="before")
    @classmethod
    def unwrap_prompt(cls, data):
        if isinstance(data, dict) and isinstance(data.get("prompt"), dict):
            return data["prompt"]
        return data
