"""Konsolenausgabe mit Icons; `PLAIN_LOGS` schaltet auf Text-Präfixe um."""
from __future__ import annotations

import os
import sys

USE_ICONS = os.environ.get("PLAIN_LOGS") is None
ICON_INFO = "ℹ️" if USE_ICONS else "[INFO]"
ICON_WARN = "⚠️" if USE_ICONS else "[WARN]"
ICON_ERR = "❌" if USE_ICONS else "[ERROR]"
ICON_SUMMARY = "📊" if USE_ICONS else "[SUM]"


def log(msg: str) -> None:
    print(f"{ICON_INFO} {msg}")


def warn(msg: str) -> None:
    print(f"{ICON_WARN} {msg}", file=sys.stderr)


def err(msg: str) -> None:
    print(f"{ICON_ERR} {msg}", file=sys.stderr)


def notice(msg: str) -> None:
    # Anlage-Meldungen ohne Icon, Format ist fest
    print(msg)
