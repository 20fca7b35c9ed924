from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine, Iterable
from pathlib import Path
from typing import Any

from watchfiles import Change, awatch

from semantic_glyph.core.lint import is_note_file

logger = logging.getLogger(__name__)

OnNotesChanged = Callable[[set[Path]], Coroutine[Any, Any, None]]

DEFAULT_DEBOUNCE_MS = 400


def _is_note_change(change: Change | int, path: str) -> bool:
    """Added or modified note files; deleted notes have nothing left to check."""
    return change != Change.deleted and is_note_file(Path(path))


class WatchfilesWatcher:
    """Re-check notes as they are saved.

    Accepts any mix of note files and directories. Each batch that
    ``watchfiles`` reports is reduced to the notes that still exist and
    handed to ``on_change`` once; failures in the callback are logged and
    watching carries on. Implements ``FileWatcherPort``.
    """

    def __init__(
        self,
        paths: str | Path | Iterable[str | Path],
        on_change: OnNotesChanged,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    ) -> None:
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self._paths = [Path(p) for p in paths]
        self._on_change = on_change
        self._debounce_ms = debounce_ms
        self._task: asyncio.Task[None] | None = None

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watching %d location(s) for note changes", len(self._paths))

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stopped watching notes")

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    async def _watch(self) -> None:
        async for batch in awatch(*self._paths, debounce=self._debounce_ms):
            notes = {Path(p) for change, p in batch if _is_note_change(change, p)}
            if not notes:
                continue
            logger.debug("Notes changed: %s", ", ".join(sorted(str(n) for n in notes)))
            try:
                await self._on_change(notes)
            except Exception:
                logger.exception("Re-checking %d changed note(s) failed", len(notes))
