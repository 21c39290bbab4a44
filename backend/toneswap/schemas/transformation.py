from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from toneswap.services.tone_catalog import Tone


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class TransformRequest(CamelModel):
    # Emptiness is checked by the service so the user gets its message, not a 422.
    text: str = Field(default="")
    tone: Tone = Tone.gen_z


class TransformOut(CamelModel):
    transformed_text: str


class ErrorOut(BaseModel):
    error: str


class CommunityGenerationOut(CamelModel):
    id: str
    original_text: str
    transformed_text: str
    tone: str
    created_at: datetime

    @classmethod
    def from_row(cls, row) -> "CommunityGenerationOut":
        return cls(
            id=str(row.id),
            original_text=row.original_text,
            transformed_text=row.transformed_text,
            tone=row.tone,
            created_at=row.created_at,
        )


class ShareRequest(CamelModel):
    text: str = Field(default="")
    tone: Tone


class ShareOut(BaseModel):
    url: str


class ToneOptionOut(BaseModel):
    value: str
    label: str
    badge: str
    color: str


class ClientConfigOut(CamelModel):
    feed_limit: int
    feed_refresh_interval_sec: int
    default_tone: str
