"""Render options descriptor and its fluent builder."""

import os
import re
import typing as t
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .address import SocketAddress
from .environment import Environment
from .exceptions import InvalidOptionsError, MissingFieldError

DEFAULT_RELOAD_PORT: t.Final = 3001
_MAX_RELOAD_PORT: t.Final = 2**32 - 1
# Characters that would break the quoted pkg-path line of a snapshot
_UNSAFE_PKG_PATH: t.Final = re.compile(r"[\"\x00-\x1f\x7f]")

EnvironmentInput = str | Environment | None
AddressInput = str | tuple[str, int] | SocketAddress


class RenderOptions(BaseModel):
    """Single source of truth for how an application bundle is rendered.

    Holds the bundle path used to build asset URLs, the environment mode,
    the address the server binds and the port of the live-reload channel.
    Instances are immutable; use `model_copy(update=...)` to derive a
    variant.

    Examples:
        >>> options = RenderOptions.builder().pkg_path("/pkg/app").build()
        >>> str(options.socket_address)
        '127.0.0.1:3000'
        >>> options.reload_port
        3001
    """

    model_config = ConfigDict(frozen=True)

    # ========== Required ==========
    pkg_path: str = Field(
        description="Path and name of the compiled bundle, e.g. '/pkg/app'",
    )

    # ========== Defaulted ==========
    environment: Environment = Field(
        default=Environment.PRODUCTION,
        description="Environment mode; development enables live reload",
    )
    socket_address: SocketAddress = Field(
        default_factory=SocketAddress.default,
        description="Address the hosting server binds to",
    )
    reload_port: int = Field(
        default=DEFAULT_RELOAD_PORT,
        ge=0,
        le=_MAX_RELOAD_PORT,
        description="Port the live-reload channel listens on",
    )

    @field_validator("pkg_path", mode="before")
    @classmethod
    def _coerce_pkg_path(cls, value: t.Any) -> t.Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @field_validator("pkg_path")
    @classmethod
    def _check_pkg_path(cls, value: str) -> str:
        if _UNSAFE_PKG_PATH.search(value):
            raise ValueError("pkg_path must not contain quotes or control characters")
        return value

    @field_validator("environment", mode="before")
    @classmethod
    def _parse_environment(cls, value: t.Any) -> t.Any:
        if value is None or (
            isinstance(value, str) and not isinstance(value, Environment)
        ):
            return Environment.from_lookup(value)
        return value

    @field_validator("socket_address", mode="before")
    @classmethod
    def _parse_socket_address(cls, value: t.Any) -> t.Any:
        if isinstance(value, (str, tuple)):
            return SocketAddress.coerce(value)
        return value

    @classmethod
    def builder(cls) -> "RenderOptionsBuilder":
        return RenderOptionsBuilder()

    @property
    def live_reload_enabled(self) -> bool:
        """Whether the hosting server should wire up live reload."""
        return self.environment.is_development

    def write_to_file(self, path: Path | None = None) -> Path:
        """Write a snapshot of these options for external tooling.

        See `render_config.snapshot.write_snapshot`.
        """
        from ..snapshot import write_snapshot

        if path is None:
            return write_snapshot(self)
        return write_snapshot(self, path)


class RenderOptionsBuilder:
    """Fluent builder for RenderOptions.

    Only the bundle path is required; every other setter may be skipped
    to keep its default. Setters convert their input immediately, so a
    malformed address fails at the `socket_address` call.

    Examples:
        >>> options = (
        ...     RenderOptions.builder()
        ...     .pkg_path("/pkg/app")
        ...     .environment("dev")
        ...     .socket_address("0.0.0.0:8080")
        ...     .build()
        ... )
        >>> options.environment
        <Environment.DEVELOPMENT: 'development'>
    """

    def __init__(self) -> None:
        self._fields: dict[str, t.Any] = {}

    def pkg_path(self, value: str | os.PathLike[str]) -> "RenderOptionsBuilder":
        self._fields["pkg_path"] = os.fspath(value)
        return self

    def environment(self, value: EnvironmentInput) -> "RenderOptionsBuilder":
        """Set the environment from a mode, a string or a lookup result.

        None is treated as a failed lookup and resolves to production.
        """
        if isinstance(value, Environment):
            self._fields["environment"] = value
        else:
            self._fields["environment"] = Environment.from_lookup(value)
        return self

    def socket_address(self, value: AddressInput) -> "RenderOptionsBuilder":
        """Set the bind address.

        Raises:
            InvalidAddressError: If the address is malformed
        """
        self._fields["socket_address"] = SocketAddress.coerce(value)
        return self

    def reload_port(self, value: int) -> "RenderOptionsBuilder":
        self._fields["reload_port"] = value
        return self

    def build(self) -> RenderOptions:
        """Create the RenderOptions.

        Raises:
            MissingFieldError: If pkg_path was never set
            InvalidOptionsError: If a field fails validation, e.g. an
                out-of-range reload_port or a pkg_path containing quotes
        """
        if "pkg_path" not in self._fields:
            raise MissingFieldError("pkg_path")
        try:
            return RenderOptions(**self._fields)
        except ValidationError as exc:
            raise InvalidOptionsError(exc.errors()) from exc
