from __future__ import annotations

import json
from dataclasses import dataclass
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("lrc", "json", "srt")


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lrc-timetags"
    return Path.home() / ".config" / "lrc-timetags"


def _config_file() -> Path:
    return _config_dir() / "config.json"


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # Files
    encoding: str

    # Export
    export_format: str  # lrc|json|srt
    srt_last_line_ms: int


def load_config() -> AppConfig:
    # Priority: config.json → LRC_TIMETAGS_* env → default
    config_dir = _config_dir()
    data = _load_file(config_dir / "config.json")

    encoding = data.get("encoding") or os.getenv("LRC_TIMETAGS_ENCODING") or "utf-8"

    export_format = str(data.get("export_format") or os.getenv("LRC_TIMETAGS_EXPORT_FORMAT") or "lrc").lower()
    if export_format not in EXPORT_FORMATS:
        logger.warning("Unknown export format '%s' in config, using lrc", export_format)
        export_format = "lrc"

    raw_last_line = data.get("srt_last_line_ms") or os.getenv("LRC_TIMETAGS_SRT_LAST_LINE_MS") or "2000"
    try:
        srt_last_line_ms = int(raw_last_line)
    except (TypeError, ValueError):
        logger.warning("Invalid srt_last_line_ms '%s' in config, using 2000", raw_last_line)
        srt_last_line_ms = 2000

    return AppConfig(
        config_dir=config_dir,
        encoding=str(encoding),
        export_format=export_format,
        srt_last_line_ms=srt_last_line_ms,
    )


def _load_file(cfg_path: Path) -> dict:
    if not cfg_path.exists():
        return {}
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", cfg_path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config_value(key: str, value: str | int) -> None:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = _load_file(cfg_path)
    data[key] = value
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
