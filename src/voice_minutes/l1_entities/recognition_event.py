"""Typed events published by a recognition engine."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Alternative(BaseModel):
    transcript: str
    confidence: float | None = None


class RecognitionResult(BaseModel):
    """One result slot of a result event; its text is the top alternative."""

    alternatives: list[Alternative] = Field(default_factory=list)
    is_final: bool = False

    @property
    def text(self) -> str:
        return self.alternatives[0].transcript if self.alternatives else ''

    @classmethod
    def of(cls, text: str, *, is_final: bool) -> RecognitionResult:
        return cls(alternatives=[Alternative(transcript=text)], is_final=is_final)


class _RunEvent(BaseModel):
    """Base for engine events. ``run_id`` is the engine run that produced the event."""

    run_id: int = 0


class ResultEvent(_RunEvent):
    """Ordered result slots; ``result_index`` marks the first slot changed since the previous event."""

    kind: Literal['result'] = 'result'
    results: list[RecognitionResult] = Field(default_factory=list)
    result_index: int = Field(default=0, ge=0)


class ErrorEvent(_RunEvent):
    kind: Literal['error'] = 'error'
    error: str
    message: str = ''


class EndEvent(_RunEvent):
    """The engine stopped listening, solicited or not."""

    kind: Literal['end'] = 'end'


EngineEvent = Annotated[Union[ResultEvent, ErrorEvent, EndEvent], Field(discriminator='kind')]
