"""Custom exception types raised while scaffolding an addon."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for errors that abort a scaffold invocation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmptyNameError(ScaffoldError):
    """Raised when the addon name is blank after trimming."""

    def __init__(self) -> None:
        super().__init__("Addon name is required.")


class AlreadyExistsError(ScaffoldError):
    """Raised when the scaffold target directory is already present."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory already exists: {self.path}")


class TemplateMissingError(ScaffoldError):
    """Raised when a template provider has no content for ``key``."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"missing template '{key}'")


class TemplateRenderingError(ScaffoldError):
    """Raised when a template cannot be rendered with the supplied values."""


__all__ = [
    "AlreadyExistsError",
    "EmptyNameError",
    "ScaffoldError",
    "TemplateMissingError",
    "TemplateRenderingError",
]
