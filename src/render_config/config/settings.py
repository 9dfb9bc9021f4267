import enum
import os
import typing as t
from dataclasses import dataclass, fields
from pathlib import Path

from ..domain.environment import Environment

DEFAULT_SNAPSHOT_PATH: t.Final = Path(".render_config.kdl")
DEFAULT_ENV_VAR: t.Final = "RENDER_ENV"
LOG_LEVEL_ENV_VAR: t.Final = "RENDER_CONFIG_LOG_LEVEL"


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings for the render_config package itself.

    Not to be confused with RenderOptions: these control where the snapshot
    is written and how the package logs, not how the application renders.
    """

    environment: Environment = Environment.PRODUCTION
    log_level: LogLevel = LogLevel.INFO
    snapshot_path: Path = DEFAULT_SNAPSHOT_PATH
    # Variable that callers are expected to read the environment mode from
    env_var: str = DEFAULT_ENV_VAR


def build_settings(**overrides: t.Any) -> Settings:
    """Create Settings, ignoring overrides that are None.

    Raises:
        TypeError: If an override does not name a Settings field
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def settings_from_env(environ: t.Mapping[str, str] | None = None) -> Settings:
    """Build Settings from RENDER_ENV and RENDER_CONFIG_LOG_LEVEL.

    An unknown log level falls back to the default.
    """
    source = os.environ if environ is None else environ
    raw_level = source.get(LOG_LEVEL_ENV_VAR)
    log_level = None
    if raw_level is not None:
        try:
            log_level = LogLevel(raw_level.strip().upper())
        except ValueError:
            log_level = None

    return build_settings(
        environment=Environment.from_env(DEFAULT_ENV_VAR, source),
        log_level=log_level,
    )
