"""PackageIdentity, Route and RouteMatch frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

PathSegments = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PackageIdentity:
    """A package name plus the version requested in the URL.

    Unscoped:  ``nuxt``       (is_scoped=False)
    Scoped:    ``@nuxt/kit``  (is_scoped=True, scope="@nuxt")
    Versioned: requested_version="1.0.0"; ``None`` means latest.
    """

    package_name: str
    requested_version: str | None = None

    @property
    def is_scoped(self) -> bool:
        return self.package_name.startswith("@") and "/" in self.package_name

    @property
    def scope(self) -> str | None:
        """The ``@scope`` part of a scoped name, else ``None``."""
        if not self.is_scoped:
            return None
        return self.package_name.split("/", 1)[0]

    @property
    def has_version(self) -> bool:
        return self.requested_version is not None


@dataclass(frozen=True, slots=True)
class Route:
    """A navigation target for the router.

    Mirrors the router contract ``{name: "package", params: {package: [...]}}``.
    """

    name: str
    package: PathSegments
    param_name: str = "package"

    @property
    def params(self) -> Mapping[str, PathSegments]:
        """Read-only view of the route parameters."""
        return MappingProxyType({self.param_name: self.package})

    def to_dict(self) -> dict[str, object]:
        """Plain-dict form of the route, e.g. for JSON serialization."""
        return {"name": self.name, "params": {self.param_name: list(self.package)}}


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful path match."""

    route: Route
    path: str
