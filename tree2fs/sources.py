"""Zeilenquellen: Datei oder Standardeingabe, einmalig beim Start gewählt."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import IO, Iterator, Optional, Union

from .errors import InputReadError

DEFAULT_PROMPT = "Please paste the file structure below."


def _strip_eol(line: str) -> str:
    # nur "\n" bzw. "\r\n" beenden eine Zeile
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _read_lines(stream: IO[str]) -> Iterator[str]:
    it = iter(stream)
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError("Failed to read line from input") from exc
        yield _strip_eol(line)


class FileLineSource:
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def lines(self) -> Iterator[str]:
        try:
            fh = open(self.path, "r", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise InputReadError(f"Failed to open input file: {self.path}") from exc
        with fh:
            yield from _read_lines(fh)


class StdinLineSource:
    def __init__(self, stream: Optional[IO[str]] = None, prompt: str = DEFAULT_PROMPT) -> None:
        self.stream = stream
        self.prompt = prompt

    def lines(self) -> Iterator[str]:
        if self.prompt:
            print(self.prompt)
        stream = self.stream if self.stream is not None else sys.stdin
        yield from _read_lines(stream)


def open_source(
    input_path: Optional[Union[str, Path]], prompt: str = DEFAULT_PROMPT
) -> Union[FileLineSource, StdinLineSource]:
    """Dateiquelle, wenn ein Pfad angegeben ist, sonst Standardeingabe."""
    if input_path is not None:
        return FileLineSource(input_path)
    return StdinLineSource(prompt=prompt)
