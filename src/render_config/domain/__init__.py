"""Domain models for render options."""

from .address import SocketAddress
from .environment import Environment
from .exceptions import (
    InvalidAddressError,
    InvalidOptionsError,
    MissingFieldError,
    RenderConfigError,
    SnapshotWriteError,
)
from .render_options import RenderOptions, RenderOptionsBuilder

__all__ = [
    "Environment",
    "SocketAddress",
    "RenderOptions",
    "RenderOptionsBuilder",
    # Exceptions
    "RenderConfigError",
    "InvalidAddressError",
    "InvalidOptionsError",
    "MissingFieldError",
    "SnapshotWriteError",
]
