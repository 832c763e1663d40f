"""Headless runner — listen until the engine goes idle, then print the transcript."""

from __future__ import annotations

import logging
import sys
import time

from voice_minutes.l4_frameworks_and_drivers.container import DependencyContainer

log = logging.getLogger('vm.headless')

_POLL_INTERVAL = 0.1


def _err(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


def run_headless(container: DependencyContainer, timeout: float | None = None) -> str:
    """Drive the session from the calling thread. Blocks until idle or *timeout* seconds pass."""
    session = container.session
    channel = container.channel

    if not session.start_listening():
        _err('Error: recognition engine refused to start')
        return session.transcript

    deadline = time.monotonic() + timeout if timeout is not None else None
    try:
        while session.is_listening:
            if deadline is not None and time.monotonic() >= deadline:
                _err('Timeout reached, stopping')
                session.stop_listening()
                break
            channel.wait(session.handle_event, timeout=_POLL_INTERVAL)
    except KeyboardInterrupt:
        _err('Interrupted, stopping')
        session.stop_listening()

    # Let a stopped engine deliver its trailing event before tearing down.
    channel.wait(session.handle_event, timeout=_POLL_INTERVAL)
    session.shutdown()
    log.info('Headless run finished (%d chars, %d restarts)', len(session.transcript), session.restart_count)
    return session.transcript
