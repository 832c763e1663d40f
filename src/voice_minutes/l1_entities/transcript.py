"""Transcript segment entity and its formatting rule."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


def format_clock(moment: datetime) -> str:
    """Format a wall-clock moment as HH:MM."""
    return f'{moment.hour:02d}:{moment.minute:02d}'


class SegmentFormat(BaseModel):
    """How a finalized chunk is rendered before it lands in the transcript."""

    timestamp: bool = False
    separator: str = '\n'


class Segment(BaseModel):
    """A finalized chunk of recognized text."""

    text: str
    committed_at: datetime = Field(default_factory=datetime.now)

    def render(self, fmt: SegmentFormat) -> str:
        prefix = f'[{format_clock(self.committed_at)}] ' if fmt.timestamp else ''
        return f'{prefix}{self.text}{fmt.separator}'
