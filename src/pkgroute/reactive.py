"""Reactive package route binding — memoized derivation over live segments.

The router owns a ``Signal`` holding the current path segments. A
``PackageRouteBinding`` derives the package identity from it with
``Computed`` values that recompute lazily, on read, only when the
segments actually changed.

Components:

- ``Signal``: Observable value. Sync callbacks and async change streams.
- ``Computed``: Read-only memoized derivation of a signal (or another
  computed value).
- ``PackageRouteBinding``: ``identity``, ``package_name`` and
  ``requested_version`` derived from the current segments.
- ``use_package_route()``: Bind to a router or a bare segments signal.

Example::

    router = PackageRouter()
    route = use_package_route(router)

    router.navigate("/@nuxt/kit/v/1.0.0")
    route.package_name.get()       # "@nuxt/kit"
    route.requested_version.get()  # "1.0.0"

Free-threading safety:
    - Signal and Computed guard their state with a Lock
    - ``Computed.snapshot()`` reads the source's (version, value) pair in
      one locked step, so a derived value is never paired with a newer
      segment sequence than the one it was computed from
    - A reader whose source snapshot is older than the cached one gets the
      cached value; stale snapshots never replace newer results
    - Each async subscriber gets its own asyncio.Queue
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import AsyncIterator, Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from pkgroute.config import VERSION_MARKER
from pkgroute.routing.parser import parse_segments
from pkgroute.routing.route import PackageIdentity, PathSegments

if TYPE_CHECKING:
    from pkgroute.routing.router import PackageRouter

logger = logging.getLogger("pkgroute.reactive")

T = TypeVar("T")
S = TypeVar("S")
T_co = TypeVar("T_co", covariant=True)

_CLOSED = object()


class Readable(Protocol[T_co]):
    """Anything a ``Computed`` can derive from."""

    def snapshot(self) -> tuple[int, T_co]: ...

    def get(self) -> T_co: ...


# ---------------------------------------------------------------------------
# Signal
# ---------------------------------------------------------------------------


class Signal(Generic[T]):
    """An observable value.

    ``set()`` only counts as a change when the new value differs from the
    current one; each change bumps ``version`` and notifies subscribers.
    """

    __slots__ = ("_callbacks", "_lock", "_queues", "_value", "_version")

    def __init__(self, value: T) -> None:
        self._value = value
        self._version = 0
        self._callbacks: list[Callable[[T], None]] = []
        self._queues: set[asyncio.Queue[Any]] = set()
        self._lock = threading.Lock()

    @property
    def version(self) -> int:
        """Number of changes observed so far."""
        with self._lock:
            return self._version

    def get(self) -> T:
        with self._lock:
            return self._value

    def snapshot(self) -> tuple[int, T]:
        """Return ``(version, value)`` read atomically."""
        with self._lock:
            return self._version, self._value

    def set(self, value: T) -> bool:
        """Replace the value. Returns ``False`` if it was equal (no change)."""
        with self._lock:
            if value == self._value:
                return False
            self._value = value
            self._version += 1
            callbacks = list(self._callbacks)
            queues = set(self._queues)

        for callback in callbacks:
            callback(value)
        for queue in queues:
            try:
                queue.put_nowait(value)
            except asyncio.QueueFull:
                logger.debug("Dropping change for a slow subscriber: %r", value)
        return True

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Call *callback* with every new value. Returns an unsubscribe function."""
        with self._lock:
            self._callbacks.append(callback)

        def unsubscribe() -> None:
            with self._lock, contextlib.suppress(ValueError):
                self._callbacks.remove(callback)

        return unsubscribe

    def changes(self, *, maxsize: int = 256) -> AsyncIterator[T]:
        """Async iterator over future values.

        The subscription is registered immediately, so values set after
        this call are delivered even before iteration starts. The
        iterator ends when ``close()`` is called.
        """
        queue: asyncio.Queue[Any] = asyncio.Queue(maxsize=maxsize)
        with self._lock:
            self._queues.add(queue)
        return self._drain(queue)

    async def _drain(self, queue: asyncio.Queue[Any]) -> AsyncIterator[T]:
        try:
            while True:
                item = await queue.get()
                if item is _CLOSED:
                    break
                yield item
        finally:
            with self._lock:
                self._queues.discard(queue)

    def close(self) -> None:
        """End every active ``changes()`` iterator."""
        with self._lock:
            queues = set(self._queues)
            self._queues.clear()
        for queue in queues:
            with contextlib.suppress(asyncio.QueueFull):
                queue.put_nowait(_CLOSED)

    def __repr__(self) -> str:
        return f"Signal({self.get()!r})"


# ---------------------------------------------------------------------------
# Computed
# ---------------------------------------------------------------------------


class Computed(Generic[S, T]):
    """A read-only value derived from *source* by *compute*.

    Pull-based: nothing happens on ``source.set()``. On read, the source's
    version is compared with the last one seen, and *compute* runs only if
    the source value differs from the input of the previous computation.
    """

    __slots__ = (
        "_compute",
        "_has_value",
        "_input",
        "_lock",
        "_recompute_count",
        "_seen_version",
        "_source",
        "_value",
        "_version",
    )

    def __init__(self, source: Readable[S], compute: Callable[[S], T]) -> None:
        self._source = source
        self._compute = compute
        self._has_value = False
        self._input: Any = None
        self._value: Any = None
        self._seen_version = -1
        self._version = 0
        self._recompute_count = 0
        self._lock = threading.Lock()

    @property
    def recompute_count(self) -> int:
        """How many times *compute* has run."""
        with self._lock:
            return self._recompute_count

    def snapshot(self) -> tuple[int, T]:
        """Return ``(version, value)``, recomputing first if the source changed."""
        source_version, source_value = self._source.snapshot()
        with self._lock:
            # A reader holding an older snapshot keeps the newer cached value.
            if source_version > self._seen_version:
                self._seen_version = source_version
                if not self._has_value or source_value != self._input:
                    value = self._compute(source_value)
                    self._recompute_count += 1
                    if not self._has_value or value != self._value:
                        self._version += 1
                    self._input = source_value
                    self._value = value
                    self._has_value = True
            return self._version, self._value

    def get(self) -> T:
        return self.snapshot()[1]

    def __repr__(self) -> str:
        return f"Computed({self.get()!r})"


# ---------------------------------------------------------------------------
# Package route binding
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PackageRouteBinding:
    """Read-only derived package identity for the current route.

    ``package_name`` and ``requested_version`` both derive from
    ``identity``, so the segments are parsed once per change. Read
    ``identity`` when both fields must come from the same navigation.
    """

    segments: Signal[PathSegments]
    identity: Computed[PathSegments, PackageIdentity]
    package_name: Computed[PackageIdentity, str]
    requested_version: Computed[PackageIdentity, str | None]
    marker: str = VERSION_MARKER

    def changes(self) -> AsyncIterator[PackageIdentity]:
        """Yield the package identity after every navigation.

        Subscribes immediately, like ``Signal.changes()``.
        """
        return self._identities(self.segments.changes())

    async def _identities(
        self, stream: AsyncIterator[PathSegments]
    ) -> AsyncIterator[PackageIdentity]:
        async for segments in stream:
            yield parse_segments(segments, marker=self.marker)


def bind_segments(
    segments: Signal[PathSegments],
    *,
    marker: str = VERSION_MARKER,
) -> PackageRouteBinding:
    """Derive package identity values from a segments signal."""

    def _parse(value: Sequence[str]) -> PackageIdentity:
        return parse_segments(value, marker=marker)

    identity: Computed[PathSegments, PackageIdentity] = Computed(segments, _parse)
    return PackageRouteBinding(
        segments=segments,
        identity=identity,
        package_name=Computed(identity, lambda ident: ident.package_name),
        requested_version=Computed(identity, lambda ident: ident.requested_version),
        marker=marker,
    )


def use_package_route(
    source: PackageRouter | Signal[PathSegments] | None = None,
) -> PackageRouteBinding:
    """Bind to the current package route.

    *source* is a ``PackageRouter`` (its live segments and version marker
    are used) or a bare segments ``Signal``. A fresh router is created
    when omitted.
    """
    if isinstance(source, Signal):
        return bind_segments(source)

    if source is None:
        from pkgroute.routing.router import PackageRouter

        source = PackageRouter()

    return bind_segments(source.segments, marker=source.config.version_marker)
