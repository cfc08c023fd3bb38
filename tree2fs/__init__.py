"""
tree2fs – Ordner-/Dateistrukturen aus `tree`-Textdarstellungen erzeugen.
"""
from __future__ import annotations

from .builder import TreeBuilder
from .errors import ConfigError, FilesystemError, InputReadError, Tree2fsError

__version__ = "0.1.0"

__all__ = [
    "TreeBuilder",
    "Tree2fsError",
    "InputReadError",
    "FilesystemError",
    "ConfigError",
    "__version__",
]
