"""Fehlertypen für tree2fs."""
from __future__ import annotations

from pathlib import Path


class Tree2fsError(Exception):
    pass


class InputReadError(Tree2fsError):
    """Eingabe konnte nicht geöffnet oder gelesen werden."""


class ConfigError(Tree2fsError):
    """Konfigurationsdatei fehlt, ist kein gültiges YAML oder hat ungültige Werte."""


class FilesystemError(Tree2fsError):
    """Ein Ordner, Elternordner oder eine Datei konnte nicht angelegt werden."""

    def __init__(self, path: Path, operation: str) -> None:
        self.path = Path(path)
        self.operation = operation
        super().__init__(f"Failed to {operation}: {self.path}")
