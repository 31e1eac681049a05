"""Errors raised while turning documents into alpine-data."""

from typing import List, Optional, Tuple

from pydantic import ValidationError


DOCUMENT_ROOT = "<document>"


class LiftError(Exception):
    """Base error for lift."""
    pass


class DecodeError(LiftError):
    """A document does not match the alpine-data schema.

    ``errors`` holds ``(path, message)`` pairs, where ``path`` is the dotted
    document location of the offending value (``users.0.groups``).
    """

    def __init__(self, message: str, errors: Optional[List[Tuple[str, str]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "DecodeError":
        """Build a DecodeError from a pydantic validation failure."""
        errors = []
        for error in exc.errors():
            path = ".".join(str(part) for part in error["loc"]) or DOCUMENT_ROOT
            errors.append((path, error["msg"]))
        count = len(errors)
        noun = "error" if count == 1 else "errors"
        return cls(f"invalid alpine-data: {count} {noun}", errors)

    @property
    def paths(self) -> List[str]:
        """Document paths of every offending value."""
        return [path for path, _ in self.errors]

    def __str__(self) -> str:
        lines = [self.message]
        for path, msg in self.errors:
            lines.append(f"  {path}: {msg}")
        return "\n".join(lines)
