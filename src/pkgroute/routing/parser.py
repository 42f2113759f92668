"""Parse package identities out of route path segments.

Supported patterns::

    /nuxt              -> ("nuxt", None)
    /nuxt/v/4.2.0      -> ("nuxt", "4.2.0")
    /@nuxt/kit         -> ("@nuxt/kit", None)
    /@nuxt/kit/v/1.0.0 -> ("@nuxt/kit", "1.0.0")
    /axios@1.13.3      -> ("axios", "1.13.3")
    /@nuxt/kit@1.0.0   -> ("@nuxt/kit", "1.0.0")
"""

import re
from collections.abc import Sequence
from urllib.parse import unquote

from pkgroute.config import VERSION_MARKER
from pkgroute.routing.route import PackageIdentity

# Scoped (@scope/name) or unscoped name, then @version. No "/" in the version.
_FUSED_VERSION_RE = re.compile(r"(@[^/]+/[^/]+|[^/]+)@([^/]+)")


def parse_segments(
    segments: Sequence[str],
    *,
    marker: str = VERSION_MARKER,
) -> PackageIdentity:
    """Recover the package identity from route path segments.

    Resolution order:

    1. The first segment equal to *marker* splits name from version, as
       long as at least one segment follows it. Later markers become part
       of the version.
    2. Otherwise the joined path is matched against ``name@version``.
    3. Otherwise the whole joined path is the name and there is no version.

    Never raises. An empty sequence yields an empty package name.
    """
    parts = list(segments)

    if marker in parts:
        index = parts.index(marker)
        if index < len(parts) - 1:
            return PackageIdentity(
                package_name="/".join(parts[:index]),
                requested_version="/".join(parts[index + 1 :]),
            )

    full_path = "/".join(parts)
    match = _FUSED_VERSION_RE.fullmatch(full_path)
    if match is not None:
        return PackageIdentity(package_name=match.group(1), requested_version=match.group(2))

    return PackageIdentity(package_name=full_path)


def split_path(path: str) -> tuple[str, ...]:
    """Split a URL path into non-empty, percent-decoded segments."""
    return tuple(unquote(p) for p in path.split("/") if p)


def parse_path(path: str, *, marker: str = VERSION_MARKER) -> PackageIdentity:
    """Parse a URL path such as ``/@nuxt/kit/v/1.0.0``."""
    return parse_segments(split_path(path), marker=marker)
