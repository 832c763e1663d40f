"""Use case: split a result event into confirmed and provisional text."""

from __future__ import annotations

from dataclasses import dataclass

from voice_minutes.l1_entities.recognition_event import ResultEvent


@dataclass(frozen=True)
class ClassifiedChunks:
    final: str
    interim: str


def classify_results(event: ResultEvent) -> ClassifiedChunks:
    """Concatenate the new slots of *event* (from ``result_index`` on) by finality, preserving order."""
    final_parts: list[str] = []
    interim_parts: list[str] = []
    for result in event.results[event.result_index :]:
        if result.is_final:
            final_parts.append(result.text)
        else:
            interim_parts.append(result.text)
    return ClassifiedChunks(final=''.join(final_parts), interim=''.join(interim_parts))
