"""Renderer ownership for a live chart view.

A chart view owns at most one renderer instance at a time. Each update
disposes the previous instance (and its resize subscription) before creating
a new one, and only the most recently started cycle may reach the renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import ExitStack
from typing import Literal, Protocol

from .chart_spec import ChartSpec

logger = logging.getLogger(__name__)

ChartState = Literal["empty", "ready"]


class ChartRenderer(Protocol):
    """A stateful renderer instance bound to one chart container."""

    def render(self, spec: ChartSpec) -> None: ...

    def resize(self) -> None: ...

    def dispose(self) -> None: ...


class RendererBackend(Protocol):
    """Factory for renderer instances (possibly loaded lazily)."""

    def create(self, *, theme: str) -> ChartRenderer: ...


class ViewportEvents(Protocol):
    """Resize notifications from the hosting viewport."""

    def subscribe(self, callback: Callable[[], None]) -> None: ...

    def unsubscribe(self, callback: Callable[[], None]) -> None: ...


class ChartLifecycle:
    """Last-write-wins owner of a chart view's renderer.

    Usage:

        with ChartLifecycle(backend, viewport) as chart:
            chart.update(spec)

    Leaving the block (view unmount) releases the renderer and its resize
    listener.
    """

    def __init__(self, backend: RendererBackend, viewport: ViewportEvents) -> None:
        self._backend = backend
        self._viewport = viewport
        self._generation = 0
        self._resources: ExitStack | None = None
        self._spec: ChartSpec | None = None

    @property
    def state(self) -> ChartState:
        return "ready" if self._resources is not None else "empty"

    @property
    def spec(self) -> ChartSpec | None:
        """Return the spec currently handed to the renderer."""

        return self._spec

    @property
    def generation(self) -> int:
        return self._generation

    def begin_cycle(self) -> int:
        """Start a recomputation and return its ticket.

        Starting a cycle supersedes every earlier ticket.
        """

        self._generation += 1
        return self._generation

    def commit(self, ticket: int, spec: ChartSpec | None) -> bool:
        """Hand a cycle's result to the renderer if the cycle is still current.

        Args:
            ticket: Value returned by `begin_cycle`.
            spec: The cycle's chart spec, or None for the empty state.

        Returns:
            True when the result was applied, False when a newer cycle
            superseded it.
        """

        if ticket != self._generation:
            logger.debug("Discarding superseded chart cycle %s (current %s).", ticket, self._generation)
            return False

        self._teardown()
        if spec is None:
            return True

        resources = ExitStack()
        try:
            renderer = self._backend.create(theme=spec.theme)
            resources.callback(renderer.dispose)
            handle_resize = renderer.resize
            self._viewport.subscribe(handle_resize)
            resources.callback(self._viewport.unsubscribe, handle_resize)
            renderer.render(spec)
        except BaseException:
            resources.close()
            raise
        self._resources = resources
        self._spec = spec
        return True

    def update(self, spec: ChartSpec | None) -> bool:
        """Start and immediately commit a cycle."""

        return self.commit(self.begin_cycle(), spec)

    def close(self) -> None:
        """Release the renderer; later commits from open tickets are ignored."""

        self._generation += 1
        self._teardown()

    def _teardown(self) -> None:
        resources, self._resources = self._resources, None
        self._spec = None
        if resources is not None:
            resources.close()

    def __enter__(self) -> "ChartLifecycle":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
