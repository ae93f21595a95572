"""System clipboard access through the platform's copy tools."""

import asyncio
import shutil
from abc import ABC, abstractmethod

from .core.logging import get_logger

log = get_logger("clipboard")

# First tool found on PATH wins
COPY_COMMANDS = (
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
)


class ClipboardError(Exception):
    """Writing to the clipboard failed."""


class AbstractClipboard(ABC):
    @abstractmethod
    async def write_text(self, text: str) -> None: ...


class SystemClipboard(AbstractClipboard):
    def __init__(self, commands=COPY_COMMANDS, timeout: float = 5.0):
        self.commands = commands
        self.timeout = timeout

    def _find_command(self) -> list[str]:
        for cmd in self.commands:
            if shutil.which(cmd[0]):
                return list(cmd)
        raise ClipboardError("No clipboard tool found (install xclip, xsel or wl-clipboard)")

    async def write_text(self, text: str) -> None:
        cmd = self._find_command()
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            raise ClipboardError(f"{cmd[0]} failed: {e}") from e

        try:
            await asyncio.wait_for(
                proc.communicate(text.encode("utf-8")), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            proc.kill()
            raise ClipboardError(f"{cmd[0]} timed out after {self.timeout}s") from e

        if proc.returncode != 0:
            raise ClipboardError(f"{cmd[0]} exited with status {proc.returncode}")
        log.debug(f"Copied {len(text)} characters with {cmd[0]}")
