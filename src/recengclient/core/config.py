"""Client configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI or the transport adapter.
- One frozen settings object per client: nothing can change the endpoint or
  credentials while a request is in flight.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from recengclient.core.exceptions import ConfigurationError

CLIENT_VERSION = "0.1.0"
CONFIG_DIR_NAME = "gravity-recengclient"


def get_user_env_file() -> Path:
    """Per-user `.env` written by `recengclient doctor configure`."""

    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / CONFIG_DIR_NAME / ".env"


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Merge `values` into the per-user `.env`, keys sorted."""

    env_path = env_path or get_user_env_file()
    merged = {k: v for k, v in dotenv_values(env_path).items() if v is not None} if env_path.exists() else {}
    merged.update(values)

    env_path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text(f"# {CONFIG_DIR_NAME} user config\n{body}", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Connection settings for the recommendation engine.

    Endpoint and credentials are optional at construction time; they are
    checked by `require_remote()` right before a call is issued. The object is
    frozen: build a new one (and a new client) to reconfigure.
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAVITY_",
        extra="ignore",
        case_sensitive=False,
        # Project `.env` first (dev), then the per-user config file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        frozen=True,
    )

    endpoint_url: str | None = Field(
        default=None,
        description="Server side interface URL, e.g. https://saas.example.com/grrec-CustomerID-war/WebshopServlet.",
    )
    username: str | None = Field(
        default=None,
        description="User name for HTTP Basic authentication.",
    )
    password: str | None = Field(
        default=None,
        repr=False,
        description="Password for HTTP Basic authentication.",
    )
    read_timeout_millis: int = Field(
        default=3000,
        gt=0,
        description="Connect and read timeout per call (milliseconds).",
    )
    user_agent: str = Field(
        default=f"gravity-recengclient-python/{CLIENT_VERSION}",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    @property
    def timeout_seconds(self) -> float:
        return self.read_timeout_millis / 1000.0

    def missing_fields(self) -> list[str]:
        return [
            name
            for name, value in (
                ("endpoint_url", self.endpoint_url),
                ("username", self.username),
                ("password", self.password),
            )
            if not value
        ]

    def require_remote(self) -> str:
        """Endpoint URL to call; fails fast when it or the credentials are missing."""

        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(
                "Recommendation engine client is not configured, missing: " + ", ".join(missing)
            )
        return self.endpoint_url
