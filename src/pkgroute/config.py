"""Route configuration.

RouteConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from pkgroute.errors import ConfigurationError

VERSION_MARKER = "v"
"""Segment that separates a package name from its version: ``/nuxt/v/4.2.0``."""


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """Package route configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouteConfig(prefix="/package", debug=True)
    """

    # Route contract shared with the router
    route_name: str = "package"
    param_name: str = "package"

    # Literal segment between name and version
    version_marker: str = VERSION_MARKER

    # Mount point of the package pages
    prefix: str = "/"

    # Log every navigation at DEBUG
    debug: bool = False

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any field is unusable."""
        if not self.route_name:
            msg = "route_name must be a non-empty string."
            raise ConfigurationError(msg)
        if not self.param_name:
            msg = "param_name must be a non-empty string."
            raise ConfigurationError(msg)
        if not self.version_marker or "/" in self.version_marker:
            msg = (
                f"version_marker must be a single non-empty path segment, "
                f"got {self.version_marker!r}."
            )
            raise ConfigurationError(msg)
        if not self.prefix.startswith("/"):
            msg = f"prefix must start with '/', got {self.prefix!r}."
            raise ConfigurationError(msg)
