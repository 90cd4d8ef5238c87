"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_API_URL = "http://localhost:3333"
DEFAULT_HTTP_TIMEOUT = 10.0  # seconds


class ConfigurationError(ValueError):
    """An environment variable holds a value the settings cannot use."""


@dataclass(frozen=True)
class Settings:

    api_url: str = DEFAULT_API_URL
    data_dir: Path = _DEFAULT_DATA_DIR
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def storage_file(self) -> Path:
        return self.data_dir / "storage.json"

    @staticmethod
    def from_env() -> Settings:
        data_dir = os.environ.get("SHOPCART_DATA_DIR")
        return Settings(
            api_url=os.environ.get("SHOPCART_API_URL", DEFAULT_API_URL).rstrip("/"),
            data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
            http_timeout=_parse_timeout(os.environ.get("SHOPCART_HTTP_TIMEOUT")),
        )


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_HTTP_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"SHOPCART_HTTP_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from exc
    if not timeout > 0:
        raise ConfigurationError(
            f"SHOPCART_HTTP_TIMEOUT must be greater than zero, got {raw!r}"
        )
    return timeout
