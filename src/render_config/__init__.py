"""render_config - render options for serving a compiled application bundle."""

from .app import App, create_app
from .config.settings import LogLevel, Settings, build_settings, settings_from_env
from .domain import (
    Environment,
    InvalidAddressError,
    InvalidOptionsError,
    MissingFieldError,
    RenderConfigError,
    RenderOptions,
    RenderOptionsBuilder,
    SnapshotWriteError,
    SocketAddress,
)
from .snapshot import SnapshotWriter, format_snapshot, write_snapshot

__all__ = [
    # Render options
    "Environment",
    "SocketAddress",
    "RenderOptions",
    "RenderOptionsBuilder",
    # Snapshot
    "SnapshotWriter",
    "format_snapshot",
    "write_snapshot",
    # App and settings
    "App",
    "create_app",
    "LogLevel",
    "Settings",
    "build_settings",
    "settings_from_env",
    # Exceptions
    "RenderConfigError",
    "InvalidAddressError",
    "InvalidOptionsError",
    "MissingFieldError",
    "SnapshotWriteError",
]
