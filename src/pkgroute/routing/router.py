"""Package router — URL paths to segments and back.

Package pages are served by a single catch-all route mounted at
``RouteConfig.prefix``: everything after the prefix is captured as the
``package`` segment sequence. The router also holds the live segments of
the current navigation, which ``use_package_route()`` observes.
"""

import logging
from urllib.parse import quote

from pkgroute.config import RouteConfig
from pkgroute.errors import NotFound
from pkgroute.reactive import Signal
from pkgroute.routing.builder import build_route
from pkgroute.routing.parser import split_path
from pkgroute.routing.route import PathSegments, Route, RouteMatch

logger = logging.getLogger("pkgroute.router")


class PackageRouter:
    """Catch-all router for package pages.

    Usage::

        router = PackageRouter(RouteConfig(prefix="/package"))
        match = router.match("/package/@nuxt/kit/v/1.0.0")
        match.route.package  # ("@nuxt", "kit", "v", "1.0.0")

        router.url_for(build_route("@nuxt/kit", "1.0.0"))
        # "/package/@nuxt/kit/v/1.0.0"
    """

    __slots__ = ("_prefix", "config", "segments")

    def __init__(self, config: RouteConfig | None = None) -> None:
        self.config = config or RouteConfig()
        self.config.validate()
        self._prefix: PathSegments = split_path(self.config.prefix)
        self.segments: Signal[PathSegments] = Signal(())

    @property
    def current_route(self) -> Route:
        """The route for the current navigation."""
        return Route(
            name=self.config.route_name,
            package=self.segments.get(),
            param_name=self.config.param_name,
        )

    def match(self, path: str) -> RouteMatch:
        """Match a URL path against the package route.

        Query strings and fragments are ignored; segments are
        percent-decoded. Raises ``NotFound`` if the path is outside
        the router's prefix.
        """
        parts = split_path(path.partition("?")[0].partition("#")[0])
        depth = len(self._prefix)

        if parts[:depth] != self._prefix:
            raise NotFound(f"No package route matches {path!r}")

        route = Route(
            name=self.config.route_name,
            package=parts[depth:],
            param_name=self.config.param_name,
        )
        return RouteMatch(route=route, path=path)

    def url_for(self, route: Route) -> str:
        """Build the URL path for *route*.

        Each segment is percent-encoded on its own; ``@`` stays literal so
        scoped names read naturally. Raises ``NotFound`` for routes not
        named after this router's package route.
        """
        if route.name != self.config.route_name:
            raise NotFound(f"No route named {route.name!r}")

        parts = [quote(p, safe="@") for p in (*self._prefix, *route.package)]
        return "/" + "/".join(parts)

    def href(self, package_name: str, version: str | None = None) -> str:
        """URL path of a package page."""
        return self.url_for(build_route(package_name, version, config=self.config))

    def navigate(self, target: Route | str) -> RouteMatch:
        """Make *target* (a route or a URL path) the current navigation.

        Updates ``segments``; derived values observe the change on their
        next read.
        """
        path = self.url_for(target) if isinstance(target, Route) else target
        match = self.match(path)
        changed = self.segments.set(match.route.package)
        if self.config.debug:
            logger.debug("Navigated to %s (changed=%s)", path, changed)
        return match
