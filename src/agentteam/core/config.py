from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_BASE_URL = "https://api.openai.com/v1"
_DEFAULT_MODEL = "gpt-4o-mini"


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _is_on(name: str, default: str = "off") -> bool:
    return os.getenv(name, default).strip().casefold() == "on"


def _home_dir() -> Path:
    configured = os.getenv("AGENTTEAM_HOME")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".agentteam"


@dataclass(frozen=True)
class LogSettings:
    level: str = "INFO"
    to_file: bool = False
    log_dir: Path | None = None
    max_bytes: int = 5_000_000
    backup_count: int = 5


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    base_url: str = _DEFAULT_BASE_URL
    model: str = _DEFAULT_MODEL
    timeout_s: float = 60.0
    max_turns: int = 10
    runner: str = "openai"
    logging: LogSettings = LogSettings()

    @classmethod
    def from_env(cls) -> "Settings":
        log_dir = os.getenv("AGENTTEAM_LOG_DIR")
        runner = os.getenv("AGENTTEAM_RUNNER", "openai").strip().casefold()
        return cls(
            api_key=os.getenv("OPENAI_API_KEY") or None,
            base_url=os.getenv("AGENTTEAM_OPENAI_BASE_URL", _DEFAULT_BASE_URL).rstrip("/"),
            model=os.getenv("AGENTTEAM_LLM_MODEL", _DEFAULT_MODEL),
            timeout_s=max(1.0, _get_float_env("AGENTTEAM_LLM_TIMEOUT_S", 60.0)),
            max_turns=max(1, _get_int_env("AGENTTEAM_MAX_TURNS", 10)),
            runner=runner if runner in {"openai", "scripted"} else "openai",
            logging=LogSettings(
                level=os.getenv("AGENTTEAM_LOG_LEVEL", "INFO"),
                to_file=_is_on("AGENTTEAM_LOG_TO_FILE", "off"),
                log_dir=Path(log_dir).expanduser() if log_dir else _home_dir() / "logs",
                max_bytes=_get_int_env("AGENTTEAM_LOG_MAX_BYTES", 5_000_000),
                backup_count=_get_int_env("AGENTTEAM_LOG_BACKUP_COUNT", 5),
            ),
        )
