"""Tests for renderer ownership, supersession and cleanup."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from analysis.chart_lifecycle import ChartLifecycle
from analysis.chart_spec import build_chart_spec
from analysis.vocabulary import Metric, Subject

pytestmark = pytest.mark.unit


class FakeViewport:
    """Records resize subscriptions."""

    def __init__(self) -> None:
        self.listeners: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> None:
        self.listeners.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        self.listeners.remove(callback)

    def fire_resize(self) -> None:
        for callback in list(self.listeners):
            callback()


class FakeRenderer:
    def __init__(self, number: int, events: list[str], *, fail: bool = False) -> None:
        self.number = number
        self.events = events
        self.fail = fail
        self.rendered = []

    def render(self, spec) -> None:
        if self.fail:
            raise RuntimeError("backend failed")
        self.rendered.append(spec)
        self.events.append(f"render:{self.number}")

    def resize(self) -> None:
        self.events.append(f"resize:{self.number}")

    def dispose(self) -> None:
        self.events.append(f"dispose:{self.number}")


class FakeBackend:
    def __init__(self) -> None:
        self.events: list[str] = []
        self.created: list[FakeRenderer] = []
        self.fail_next = False

    def create(self, *, theme: str) -> FakeRenderer:
        renderer = FakeRenderer(len(self.created) + 1, self.events, fail=self.fail_next)
        self.fail_next = False
        self.created.append(renderer)
        self.events.append(f"create:{renderer.number}:{theme}")
        return renderer


@pytest.fixture
def spec(records):
    return build_chart_spec(records, [Subject.total], [Metric.scaled_score], student_name="Li Hua")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def viewport() -> FakeViewport:
    return FakeViewport()


def test_starts_empty(backend, viewport) -> None:
    chart = ChartLifecycle(backend, viewport)
    assert chart.state == "empty"
    assert chart.spec is None


def test_update_renders_and_subscribes(backend, viewport, spec) -> None:
    chart = ChartLifecycle(backend, viewport)
    assert chart.update(spec) is True

    assert chart.state == "ready"
    assert chart.spec is spec
    assert backend.events == ["create:1:light", "render:1"]
    assert len(viewport.listeners) == 1


def test_new_spec_disposes_previous_renderer_first(backend, viewport, spec) -> None:
    """The old instance and its listener are released before the new one exists."""

    chart = ChartLifecycle(backend, viewport)
    chart.update(spec)
    chart.update(spec)

    assert backend.events == ["create:1:light", "render:1", "dispose:1", "create:2:light", "render:2"]
    assert len(viewport.listeners) == 1

    viewport.fire_resize()
    assert backend.events[-1] == "resize:2"
    assert "resize:1" not in backend.events


def test_empty_spec_tears_down(backend, viewport, spec) -> None:
    chart = ChartLifecycle(backend, viewport)
    chart.update(spec)
    chart.update(None)

    assert chart.state == "empty"
    assert chart.spec is None
    assert backend.events[-1] == "dispose:1"
    assert viewport.listeners == []


def test_superseded_cycle_never_reaches_renderer(backend, viewport, spec) -> None:
    """Only the most recently started cycle may render."""

    chart = ChartLifecycle(backend, viewport)
    stale = chart.begin_cycle()
    latest = chart.begin_cycle()

    assert chart.commit(stale, spec) is False
    assert backend.created == []

    assert chart.commit(latest, spec) is True
    assert len(backend.created) == 1


def test_render_failure_releases_resources(backend, viewport, spec) -> None:
    chart = ChartLifecycle(backend, viewport)
    backend.fail_next = True

    with pytest.raises(RuntimeError):
        chart.update(spec)

    assert chart.state == "empty"
    assert backend.events == ["create:1:light", "dispose:1"]
    assert viewport.listeners == []


def test_context_exit_releases_renderer_and_ignores_open_tickets(backend, viewport, spec) -> None:
    """Unmounting the view releases everything; late results are dropped."""

    with ChartLifecycle(backend, viewport) as chart:
        chart.update(spec)
        pending = chart.begin_cycle()

    assert chart.state == "empty"
    assert backend.events[-1] == "dispose:1"
    assert viewport.listeners == []
    assert chart.commit(pending, spec) is False
    assert len(backend.created) == 1


def test_dark_theme_is_passed_to_backend(backend, viewport, records) -> None:
    dark = build_chart_spec(records, [Subject.total], [Metric.scaled_score], student_name="Li Hua", theme="dark")
    ChartLifecycle(backend, viewport).update(dark)
    assert backend.events[0] == "create:1:dark"
