from pathlib import Path
from typing import Protocol


class FileWatcherPort(Protocol):
    """Watches note files and directories, reporting each batch of changed notes."""

    @property
    def paths(self) -> list[Path]: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...

    async def wait(self) -> None:
        """Block until watching ends, normally by cancellation."""
        ...
