"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field


class CompareRequest(BaseModel):
    """Body of a food comparison request."""

    food_ids: list[int] = Field(default_factory=list)
