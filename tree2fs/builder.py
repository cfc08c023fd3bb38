"""
Zeilenweiser Parser für `tree`-Ausgaben und Materialisierung im Dateisystem.

Jede Zeile wird einzeln verarbeitet:

* Tiefe aus den Verbindungszeichen (│ ├ └) bestimmen, bei Zeilen mit
  führendem Leerzeichen zusätzlich über die Anzahl der Leerzeichen korrigieren.
* Name freilegen (Verbindungs- und Füllzeichen vorne entfernen).
* Pfad-Stack an die Tiefe anpassen und den Namen anhängen.
* Ordner (Name endet auf `/`) bzw. leere Datei anlegen, sofern noch nicht vorhanden.
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import FilesystemError
from .logs import notice
from .report import BuildReport

###########################
# Zeichensätze
###########################
STRUCTURE_GLYPHS = ("│", "├", "└")
FILL_GLYPH = "─"
SEPARATOR = "/"
DEFAULT_INDENT_MODULUS = 4

# Verbindungs-/Füllzeichen am Zeilenanfang, inkl. eingestreuter Leerzeichen
LEADING_RE = re.compile(r"^[│├└─\s]+")


class TreeBuilder:
    """Faltet eine Folge von Baumzeilen in Ordner und leere Dateien unter `output_dir`."""

    def __init__(
        self,
        output_dir: Union[str, os.PathLike],
        indent_modulus: int = DEFAULT_INDENT_MODULUS,
        report: Optional[BuildReport] = None,
    ) -> None:
        if indent_modulus < 1:
            raise ValueError(f"indent_modulus must be positive, got {indent_modulus}")
        self.output_dir = Path(output_dir)
        self.indent_modulus = indent_modulus
        self.report = report if report is not None else BuildReport()
        self.current_path: List[str] = []
        self.last_depth = 0
        # gelernte Leerzeichen-Einheit; wird gespeichert, aber nicht für die Tiefe genutzt
        self.indent_count: Optional[int] = None

    def process_line(self, line: str) -> None:
        if not line.strip():
            return

        clean = self.clean_line(line)
        if not clean:
            # reine Verbindungszeilen wie "│" tragen keinen Namen
            return

        depth = self.calculate_depth(line)
        self.update_current_path(depth, clean)
        self.report.lines += 1

        full_path = self.output_dir / SEPARATOR.join(self.current_path)
        self.create_filesystem_entry(full_path, clean.endswith(SEPARATOR))

    def process_lines(self, lines: Iterable[str]) -> BuildReport:
        for line in lines:
            self.process_line(line)
        return self.report

    ###########################
    # Parsing
    ###########################

    def calculate_depth(self, line: str) -> int:
        count = sum(1 for ch in line if ch in STRUCTURE_GLYPHS)

        if count == 2 and self.indent_count is None:
            self.indent_count = len(line) - len(line.lstrip(" "))

        if line.startswith(" "):
            count += line.count(" ") % self.indent_modulus

        return count

    @staticmethod
    def clean_line(line: str) -> str:
        return LEADING_RE.sub("", line).strip()

    def update_current_path(self, depth: int, clean_line: str) -> None:
        if depth <= self.last_depth:
            del self.current_path[depth:]
        self.current_path.append(clean_line)
        self.last_depth = depth

    ###########################
    # Dateisystem
    ###########################

    def create_filesystem_entry(self, path: Path, is_directory: bool) -> None:
        if os.path.exists(path):
            self.report.skipped += 1
            return

        if is_directory:
            try:
                os.makedirs(path, exist_ok=True)
            except OSError as exc:
                raise FilesystemError(path, "create directory") from exc
            notice(f"Created directory: {path}")
            self.report.directories += 1
            return

        parent = path.parent
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(parent, "create parent directory") from exc
        try:
            open(path, "w", encoding="utf-8").close()
        except OSError as exc:
            raise FilesystemError(path, "create file") from exc
        notice(f"Created file: {path}")
        self.report.files += 1
