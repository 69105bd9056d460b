"""Engine exception types."""

from __future__ import annotations


class EngineError(Exception):
    """Base engine error carrying a name, a message and an optional location."""

    def __init__(self, name: str, message: str, source: str = "", line: int = 0) -> None:
        super().__init__(message)
        self.name = name
        self.message = message
        self.source = source
        self.line = line

    def what(self) -> str:
        """Return ``[name] message``, followed by ``(source:line)`` when a line is set."""
        text = f"[{self.name}] {self.message}"
        if self.line > 0:
            text += f" ({self.source}:{self.line})"
        return text

    def __str__(self) -> str:
        return self.what()


class UnimplementedError(EngineError):
    """Raised where a feature has not been implemented."""

    def __init__(self, source: str = "", line: int = 0) -> None:
        super().__init__("UnImplementedException", "unimplemented", source, line)


class EngineRuntimeError(EngineError):
    """Raised on an error detected while the engine runs."""

    def __init__(self, message: str, source: str = "", line: int = 0) -> None:
        super().__init__("RuntimeException", message, source, line)