"""Code block accumulator: groups consecutive indented lines into one fenced block"""

from enum import Enum


class BlockState(str, Enum):
    idle = "idle"
    collecting = "collecting"


class CodeBlockAccumulator:
    """Two-state machine (idle/collecting) owning the buffer of de-indented lines.

    flush() hands the buffer to the caller and returns to idle.
    """

    def __init__(self) -> None:
        self.state = BlockState.idle
        self._buffer: list[str] = []

    @property
    def collecting(self) -> bool:
        return self.state is BlockState.collecting

    def open(self, text: str) -> None:
        self.state = BlockState.collecting
        self._buffer = [text]

    def append(self, text: str) -> None:
        self._buffer.append(text)

    def flush(self) -> list[str]:
        """Close the block and return its lines; empty when idle."""
        lines, self._buffer = self._buffer, []
        self.state = BlockState.idle
        return lines
