"""Build package routes from a package name and optional version."""

from pkgroute.config import RouteConfig
from pkgroute.routing.route import Route

_DEFAULT_CONFIG = RouteConfig()


def build_route(
    package_name: str,
    version: str | None = None,
    *,
    config: RouteConfig | None = None,
) -> Route:
    """Build the route for a package page.

    Examples::

        build_route("nuxt")                -> package=("nuxt",)
        build_route("nuxt", "4.2.0")       -> package=("nuxt", "v", "4.2.0")
        build_route("@nuxt/kit", "1.0.0")  -> package=("@nuxt", "kit", "v", "1.0.0")

    The name is trusted as given: a malformed name yields a malformed but
    well-typed route.
    """
    cfg = config or _DEFAULT_CONFIG
    parts = package_name.split("/")
    if version:
        parts.extend((cfg.version_marker, version))
    return Route(
        name=cfg.route_name,
        package=tuple(p for p in parts if p),
        param_name=cfg.param_name,
    )


def get_package_route(pkg: str, version: str | None = None) -> Route:
    """Route for navigating to *pkg*, optionally pinned to *version*."""
    return build_route(pkg, version)
