from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BuildReport:
    lines: int = 0          # verarbeitete, nicht-leere Zeilen
    directories: int = 0    # neu angelegte Ordner
    files: int = 0          # neu angelegte Dateien
    skipped: int = 0        # bereits vorhanden

    @property
    def created(self) -> int:
        return self.directories + self.files

    def summary(self) -> str:
        return (
            f"{self.lines} lines, {self.directories} directories created, "
            f"{self.files} files created, {self.skipped} already present"
        )
