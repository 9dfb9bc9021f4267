"""Runtime environment mode for rendered applications."""

import enum
import os
import typing as t


class Environment(enum.StrEnum):
    """Whether the application is deployed for development or production.

    Parsing is lenient: anything that is not a recognised spelling of
    development resolves to PRODUCTION, so a typo in an environment
    variable never stops a server from starting.
    """

    PRODUCTION = "production"
    DEVELOPMENT = "development"

    @classmethod
    def default(cls) -> "Environment":
        return cls.PRODUCTION

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """Classify a free-form string, case-insensitively.

        Examples:
            >>> Environment.parse("DEV")
            <Environment.DEVELOPMENT: 'development'>
            >>> Environment.parse("staging")
            <Environment.PRODUCTION: 'production'>
        """
        normalized = value.strip().lower()
        environment = _ALIASES.get(normalized)
        if environment is None:
            # Imported lazily: the logging package depends on this module
            from ..infrastructure.logging import get_logger

            get_logger(__name__).warning(
                f"Environment '{value}' is not recognised, using production. "
                "Maybe try `dev` or `prod`"
            )
            return cls.default()
        return environment

    @classmethod
    def from_lookup(cls, value: str | None) -> "Environment":
        """Classify the result of an optional lookup.

        A failed lookup (None) resolves to PRODUCTION without a warning.
        """
        if value is None:
            return cls.default()
        return cls.parse(value)

    @classmethod
    def from_env(
        cls, name: str, environ: t.Mapping[str, str] | None = None
    ) -> "Environment":
        """Classify the value of environment variable `name`.

        Args:
            name: Variable to read, e.g. "RENDER_ENV"
            environ: Mapping to read from (default: os.environ)
        """
        source = os.environ if environ is None else environ
        return cls.from_lookup(source.get(name))

    @property
    def label(self) -> str:
        """Stable short label used in snapshot files."""
        return _LABELS[self]

    @property
    def is_development(self) -> bool:
        return self is Environment.DEVELOPMENT


_ALIASES: t.Final[dict[str, Environment]] = {
    "dev": Environment.DEVELOPMENT,
    "development": Environment.DEVELOPMENT,
    "prod": Environment.PRODUCTION,
    "production": Environment.PRODUCTION,
}

_LABELS: t.Final[dict[Environment, str]] = {
    Environment.PRODUCTION: "PROD",
    Environment.DEVELOPMENT: "DEV",
}
