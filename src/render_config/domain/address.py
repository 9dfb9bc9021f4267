"""Socket address value type."""

import ipaddress
import typing as t

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, ValidationError

from .exceptions import InvalidAddressError

DEFAULT_HOST: t.Final = "127.0.0.1"
DEFAULT_PORT: t.Final = 3000


class SocketAddress(BaseModel):
    """An IP address and port pair a server binds to.

    Hostnames are not accepted, only literal IPv4 or IPv6 addresses.
    """

    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(description="IPv4 or IPv6 address to bind")
    port: int = Field(ge=0, le=65535, description="TCP port to bind")

    @classmethod
    def default(cls) -> "SocketAddress":
        """Loopback address on port 3000."""
        return cls(host=ipaddress.ip_address(DEFAULT_HOST), port=DEFAULT_PORT)

    @classmethod
    def parse(cls, value: str) -> "SocketAddress":
        """Parse 'host:port', or '[host]:port' for IPv6.

        Raises:
            InvalidAddressError: If the string is not a valid address
        """
        host_part, sep, port_part = value.rpartition(":")
        if not sep or not host_part:
            raise InvalidAddressError(value, "expected 'host:port'")
        if not (port_part.isascii() and port_part.isdecimal()):
            raise InvalidAddressError(value, f"port '{port_part}' is not a number")

        if host_part.startswith("[") and host_part.endswith("]"):
            host_part = host_part[1:-1]
            if ":" not in host_part:
                raise InvalidAddressError(value, "brackets are only valid for IPv6")
        elif ":" in host_part:
            raise InvalidAddressError(value, "IPv6 hosts must be wrapped in brackets")

        return cls._validated(value, host=host_part, port=int(port_part))

    @classmethod
    def coerce(
        cls, value: "str | tuple[str, int] | SocketAddress"
    ) -> "SocketAddress":
        """Convert any accepted address form into a SocketAddress."""
        if isinstance(value, SocketAddress):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, tuple) and len(value) == 2:
            host, port = value
            return cls._validated(value, host=host, port=port)
        raise InvalidAddressError(value, "expected 'host:port' or (host, port)")

    @classmethod
    def _validated(
        cls, raw: object, *, host: object, port: object
    ) -> "SocketAddress":
        try:
            return cls(host=host, port=port)
        except ValidationError as exc:
            reason = "; ".join(error["msg"] for error in exc.errors())
            raise InvalidAddressError(raw, reason) from exc

    def __str__(self) -> str:
        if self.host.version == 6:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"
