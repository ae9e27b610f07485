"""Sinks — text output targets that carry an ambient rendering configuration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO

from streamfmt.state import RenderingConfiguration


class Sink(ABC):
    """Base output target.

    `config` is the configuration renderers read when writing a value. The
    dispatch loop swaps it per directive and restores the ambient one at the
    end of every call. Configurations are replaced, never mutated in place, so
    the ambient object itself serves as its own snapshot.
    """

    def __init__(self, config: RenderingConfiguration | None = None) -> None:
        self.config = config if config is not None else RenderingConfiguration.defaults()

    @abstractmethod
    def write(self, text: str) -> None:
        """Append text to the output."""

    def snapshot(self) -> RenderingConfiguration:
        return self.config

    def restore(self, snapshot: RenderingConfiguration) -> None:
        self.config = snapshot

    def apply(self, config: RenderingConfiguration) -> None:
        self.config = config

    def isolated(self, **changes) -> StringSink:
        """A scratch buffer carrying a copy of the current configuration."""
        return StringSink(self.config.copy(**changes))


class StringSink(Sink):
    """Collects written text in memory."""

    def __init__(self, config: RenderingConfiguration | None = None) -> None:
        super().__init__(config)
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def getvalue(self) -> str:
        return "".join(self._parts)


class StreamSink(Sink):
    """Forwards written text to a text stream such as sys.stdout."""

    def __init__(self, stream: IO[str], config: RenderingConfiguration | None = None) -> None:
        super().__init__(config)
        self.stream = stream

    def write(self, text: str) -> None:
        if text:
            self.stream.write(text)


def as_sink(out: Sink | IO[str]) -> Sink:
    """Accept either a Sink or any object with a write(str) method."""
    if isinstance(out, Sink):
        return out
    if callable(getattr(out, "write", None)):
        return StreamSink(out)
    raise TypeError(f"cannot write formatted output to {type(out).__name__}")
