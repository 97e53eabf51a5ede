"""Exception types raised while loading inputs and writing documentation."""

from __future__ import annotations

from pathlib import Path


class GeneratorConfigError(ValueError):
    """Raised when the generator configuration is invalid or incomplete."""


class TreeLoadError(ValueError):
    """Raised when the serialized node tree cannot be decoded."""


class OutputFileError(OSError):
    """Raised when a file cannot be opened for reading or writing.

    Parameters
    ----------
    path : Path
        Offending file path.
    action : str
        Either ``"reading"`` or ``"writing"``; used in the message only.
    """

    def __init__(self, path: Path, action: str = "writing") -> None:
        self.path = Path(path)
        self.action = action
        super().__init__(f"File {self.path} failed to open for {action}")


__all__ = ["GeneratorConfigError", "OutputFileError", "TreeLoadError"]
