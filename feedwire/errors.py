from __future__ import annotations

from typing import Optional

from pydantic import ValidationError


class FeedwireError(Exception):
    """Base class for every error raised by feedwire."""


class InvalidArgument(FeedwireError, ValueError):
    """A required selection field or parameter is missing or malformed."""

    @classmethod
    def from_validation_error(cls, what: str, exc: ValidationError) -> "InvalidArgument":
        problems = []
        for err in exc.errors():
            loc = ".".join(str(part) for part in err["loc"])
            problems.append(f"{loc}: {err['msg']}" if loc else err["msg"])
        msg = "\n".join(f"- {p}" for p in problems)
        return cls(f"Invalid {what}:\n{msg}")


class UnsupportedProtocol(FeedwireError, ValueError):
    def __init__(self, protocol_type: str) -> None:
        self.protocol_type = protocol_type
        super().__init__(f"Unsupported protocol type: {protocol_type!r}")


class UnsupportedFormat(FeedwireError, ValueError):
    def __init__(self, format_type: str, protocol_type: Optional[str] = None) -> None:
        self.format_type = format_type
        self.protocol_type = protocol_type
        msg = f"Unsupported format type: {format_type!r}"
        if protocol_type is not None:
            msg += f" for protocol {protocol_type!r}"
        super().__init__(msg)


class WrongVariant(FeedwireError, ValueError):
    """Narrowing a tagged value to a variant it does not hold."""

    def __init__(self, *, actual: str, expected: str) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"Wrong notification params variant: expected={expected} got={actual}")


class ConfigurationError(FeedwireError, RuntimeError):
    """Startup wiring is inconsistent (duplicate registration, missing sender, ...)."""
