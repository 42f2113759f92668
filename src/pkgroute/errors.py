"""pkgroute exception hierarchy.

The route builder and parser are total and never raise. These types are
raised by configuration validation and by ``PackageRouter`` when asked to
handle a path or route it does not own.
"""

from dataclasses import dataclass


class PkgRouteError(Exception):
    """Base for all pkgroute-specific errors."""


class ConfigurationError(PkgRouteError):
    """Raised when a ``RouteConfig`` is invalid.

    Typically caught when a ``PackageRouter`` is constructed.
    """


@dataclass(frozen=True, slots=True)
class NotFound(PkgRouteError):  # noqa: N818 — conventional name for routing misses
    """No package route matches the given path or route name."""

    detail: str = "Not Found"

    def __str__(self) -> str:
        return self.detail
