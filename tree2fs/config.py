"""
Einstellungen für tree2fs, optional aus einer YAML-Datei.

Beispiel `tree2fs.yaml`::

    output_dir: build/scaffold
    indent_modulus: 4
    summary: true
    prompt: "Paste the tree below."

Kommandozeilen-Optionen haben Vorrang vor der Datei.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .builder import DEFAULT_INDENT_MODULUS
from .errors import ConfigError
from .sources import DEFAULT_PROMPT

CONFIG_FILENAMES = ("tree2fs.yaml", ".tree2fs.yaml")


@dataclass
class Settings:
    output_dir: str = "."
    indent_modulus: int = DEFAULT_INDENT_MODULUS
    summary: bool = False
    prompt: str = DEFAULT_PROMPT

    @staticmethod
    def from_cfg(cfg: Dict[str, Any], source: str = "config") -> "Settings":
        defaults = Settings()

        output_dir = cfg.get("output_dir", defaults.output_dir)
        if not isinstance(output_dir, str) or not output_dir.strip():
            raise ConfigError(f"{source}: 'output_dir' must be a non-empty string")

        modulus = cfg.get("indent_modulus", defaults.indent_modulus)
        # bool ist ein int-Subtyp
        if isinstance(modulus, bool) or not isinstance(modulus, int) or modulus < 1:
            raise ConfigError(f"{source}: 'indent_modulus' must be a positive integer, got {modulus!r}")

        summary = cfg.get("summary", defaults.summary)
        if not isinstance(summary, bool):
            raise ConfigError(f"{source}: 'summary' must be true or false")

        prompt = cfg.get("prompt", defaults.prompt)
        if prompt is None:
            prompt = ""
        if not isinstance(prompt, str):
            raise ConfigError(f"{source}: 'prompt' must be a string")

        return Settings(
            output_dir=output_dir,
            indent_modulus=modulus,
            summary=summary,
            prompt=prompt,
        )


def find_config(cwd: Optional[Path] = None) -> Optional[Path]:
    base = cwd if cwd is not None else Path.cwd()
    for name in CONFIG_FILENAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Optional[Union[str, Path]] = None, cwd: Optional[Path] = None) -> Settings:
    if path is None:
        found = find_config(cwd)
        if found is None:
            return Settings()
        cfg_path = found
    else:
        cfg_path = Path(path)
        if not cfg_path.is_file():
            raise ConfigError(f"Config file not found: {cfg_path}")

    try:
        raw = cfg_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Config file cannot be read: {cfg_path}") from exc

    # YAML verbietet Tabs -> klare Meldung statt ScannerError
    if "\t" in raw:
        raise ConfigError(f"Tabs found in {cfg_path.name}. YAML does not allow tabs, use spaces.")
    try:
        cfg = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{cfg_path.name} is not valid YAML: {exc}") from exc
    if not isinstance(cfg, dict):
        raise ConfigError(f"{cfg_path.name} must contain a mapping at top level")

    return Settings.from_cfg(cfg, source=cfg_path.name)
