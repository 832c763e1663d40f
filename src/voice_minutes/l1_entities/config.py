"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from voice_minutes.l1_entities.transcript import SegmentFormat


class SessionConfig(BaseModel):
    on_end: Literal['restart', 'stop']
    max_restarts: int = Field(ge=0)  # consecutive restarts without any recognized text


class PersistenceConfig(BaseModel):
    draft_key: str
    path: str | None = None  # None → platform user data dir


class DebugConfig(BaseModel):
    log_capacity: int = Field(gt=0)
    log_dir: str | None = None  # None → platform user log dir


class AppConfig(BaseModel):
    transcript: SegmentFormat
    session: SessionConfig
    persistence: PersistenceConfig
    debug: DebugConfig
