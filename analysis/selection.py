"""Immutable chart selection state and its reducers.

The chart page recomputes its specification from a `SelectionState`
snapshot. Reducers return a new state instead of mutating the old one, so any
recomputation can be reproduced from its inputs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

from .chart_spec import ChartSpec, build_chart_spec
from .vocabulary import Metric, Subject

DEFAULT_SUBJECTS: tuple[Subject, ...] = (Subject.total, Subject.language)
DEFAULT_METRICS: tuple[Metric, ...] = (Metric.scaled_score,)


@dataclass(frozen=True, slots=True)
class StudentIdentity:
    """The student a chart is drawn for.

    Attributes:
        name: Display name.
        grade: Grade/year label.
        class_name: Class label within the grade.
        student_id: Optional store identifier.
    """

    name: str
    grade: str
    class_name: str
    student_id: int | None = None


@dataclass(frozen=True, slots=True)
class SelectionState:
    """Snapshot of everything a chart recomputation reads."""

    student: StudentIdentity | None = None
    records: tuple[Mapping[str, object], ...] = ()
    subjects: tuple[Subject, ...] = ()
    metrics: tuple[Metric, ...] = ()
    theme: str = "light"


def select_student(
    state: SelectionState,
    student: StudentIdentity,
    records: Sequence[Mapping[str, object]],
    *,
    subjects: Sequence[Subject] = DEFAULT_SUBJECTS,
    metrics: Sequence[Metric] = DEFAULT_METRICS,
) -> SelectionState:
    """Load a student's records and apply the default selection."""

    return replace(
        state,
        student=student,
        records=tuple(records),
        subjects=tuple(dict.fromkeys(subjects)),
        metrics=tuple(dict.fromkeys(metrics)),
    )


def clear_student(state: SelectionState) -> SelectionState:
    """Return to the search screen, keeping only the theme."""

    return SelectionState(theme=state.theme)


def toggle_subject(state: SelectionState, subject: Subject) -> SelectionState:
    """Remove a selected subject, or append it after the current ones."""

    return replace(state, subjects=_toggle(state.subjects, subject))


def toggle_metric(state: SelectionState, metric: Metric) -> SelectionState:
    """Remove a selected metric, or append it after the current ones."""

    return replace(state, metrics=_toggle(state.metrics, metric))


def set_theme(state: SelectionState, theme: str) -> SelectionState:
    return replace(state, theme=theme)


def chart_spec_for_state(state: SelectionState) -> ChartSpec | None:
    """Recompute the chart for a state; None when there is nothing to draw."""

    if state.student is None or not state.records:
        return None
    return build_chart_spec(
        state.records,
        state.subjects,
        state.metrics,
        student_name=state.student.name,
        theme=state.theme,
    )


def _toggle(current: tuple, item: object) -> tuple:
    if item in current:
        return tuple(value for value in current if value != item)
    return (*current, item)
