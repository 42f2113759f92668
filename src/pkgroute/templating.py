"""Kida template helpers for linking to package pages.

Registers ``package_url`` and ``package_route`` globals plus a
``package_url`` filter on a kida Environment::

    {{ package_url("@nuxt/kit", "1.0.0") }}   -> /@nuxt/kit/v/1.0.0
    {{ "nuxt" | package_url }}                -> /nuxt
    {{ identity | package_url }}              -> works on PackageIdentity
"""

from collections.abc import Callable
from typing import Any

from kida import Environment

from pkgroute.routing.builder import build_route
from pkgroute.routing.route import PackageIdentity, Route
from pkgroute.routing.router import PackageRouter


def package_url_filter(router: PackageRouter) -> Callable[..., str]:
    """Build the ``package_url`` filter bound to *router*."""

    def package_url(value: Any, version: str | None = None) -> str:
        if isinstance(value, PackageIdentity):
            return router.href(value.package_name, version or value.requested_version)
        return router.href(str(value), version)

    return package_url


def register_template_helpers(
    env: Environment,
    router: PackageRouter | None = None,
) -> Environment:
    """Add package link helpers to *env* and return it."""
    router = router or PackageRouter()

    def package_route(pkg: str, version: str | None = None) -> Route:
        return build_route(pkg, version, config=router.config)

    env.add_global("package_url", router.href)
    env.add_global("package_route", package_route)
    env.update_filters({"package_url": package_url_filter(router)})
    return env
