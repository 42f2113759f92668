"""pkgroute — package page URLs to package identities and back.

Builds router targets for package pages (scoped or unscoped, optionally
versioned) and parses path segments back into a package name and the
requested version.

Basic usage::

    from pkgroute import get_package_route, parse_segments

    route = get_package_route("@nuxt/kit", "1.0.0")
    route.params["package"]  # ("@nuxt", "kit", "v", "1.0.0")

    parse_segments(["axios@1.13.3"])
    # PackageIdentity(package_name="axios", requested_version="1.13.3")

Live binding::

    from pkgroute import PackageRouter, use_package_route

    router = PackageRouter()
    route = use_package_route(router)
    router.navigate("/nuxt/v/4.2.0")
    route.requested_version.get()  # "4.2.0"
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "Computed",
    "ConfigurationError",
    "NotFound",
    "PackageIdentity",
    "PackageRouteBinding",
    "PackageRouter",
    "PkgRouteError",
    "Route",
    "RouteConfig",
    "RouteMatch",
    "Signal",
    "build_route",
    "get_package_route",
    "parse_path",
    "parse_segments",
    "register_template_helpers",
    "use_package_route",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Computed": "pkgroute.reactive",
    "ConfigurationError": "pkgroute.errors",
    "NotFound": "pkgroute.errors",
    "PackageIdentity": "pkgroute.routing.route",
    "PackageRouteBinding": "pkgroute.reactive",
    "PackageRouter": "pkgroute.routing.router",
    "PkgRouteError": "pkgroute.errors",
    "Route": "pkgroute.routing.route",
    "RouteConfig": "pkgroute.config",
    "RouteMatch": "pkgroute.routing.route",
    "Signal": "pkgroute.reactive",
    "build_route": "pkgroute.routing.builder",
    "get_package_route": "pkgroute.routing.builder",
    "parse_path": "pkgroute.routing.parser",
    "parse_segments": "pkgroute.routing.parser",
    "register_template_helpers": "pkgroute.templating",
    "use_package_route": "pkgroute.reactive",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pkgroute`` fast and defers importing kida until template
    helpers are requested.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
