"""Tests for field-key construction and cross-product resolution."""

from __future__ import annotations

import pytest

from analysis.field_keys import FieldKey, resolve_field_keys
from analysis.vocabulary import Metric, MetricFamily, Subject

pytestmark = pytest.mark.unit


def test_field_key_renders_subject_and_metric() -> None:
    """A field key joins subject and metric with an underscore."""

    key = FieldKey(Subject.total, Metric.scaled_score)
    assert key.key == "total_scaled-score"
    assert str(key) == "total_scaled-score"


def test_resolve_iterates_subjects_outer_metrics_inner() -> None:
    """Subjects form the outer loop, metrics the inner loop, in caller order."""

    keys = resolve_field_keys(
        [Subject.total, Subject.language],
        [Metric.scaled_score, Metric.school_rank],
    )
    assert [k.key for k in keys] == [
        "total_scaled-score",
        "total_school-rank",
        "language_scaled-score",
        "language_school-rank",
    ]


def test_resolve_preserves_caller_order_rather_than_vocabulary_order() -> None:
    """Order follows the selection, not the enum declaration order."""

    keys = resolve_field_keys([Subject.physics, Subject.math], [Metric.class_rank, Metric.scaled_score])
    assert [k.key for k in keys] == [
        "physics_class-rank",
        "physics_scaled-score",
        "math_class-rank",
        "math_scaled-score",
    ]


@pytest.mark.parametrize("subject_count,metric_count", [(1, 1), (3, 2), (10, 4)])
def test_resolve_length_is_product_of_selection_sizes(subject_count: int, metric_count: int) -> None:
    """Resolution yields |subjects| * |metrics| keys."""

    subjects = list(Subject)[:subject_count]
    metrics = list(Metric)[:metric_count]
    assert len(resolve_field_keys(subjects, metrics)) == subject_count * metric_count


def test_resolve_returns_empty_when_either_side_is_empty() -> None:
    """No subjects or no metrics means no field keys."""

    assert resolve_field_keys([Subject.total], []) == ()
    assert resolve_field_keys([], [Metric.scaled_score]) == ()


def test_resolve_collapses_repeated_selections() -> None:
    """Repeated entries keep their first position only."""

    keys = resolve_field_keys([Subject.math, Subject.math], [Metric.scaled_score])
    assert [k.key for k in keys] == ["math_scaled-score"]


def test_parse_round_trips_and_rejects_unknown_names() -> None:
    """Parsing recovers typed halves and rejects names outside the vocabulary."""

    parsed = FieldKey.parse("language_joint-exam-rank")
    assert parsed == FieldKey(Subject.language, Metric.joint_exam_rank)
    assert parsed.family is MetricFamily.rank

    with pytest.raises(ValueError):
        FieldKey.parse("language_raw-score")
    with pytest.raises(ValueError):
        FieldKey.parse("music_scaled-score")
    with pytest.raises(ValueError):
        FieldKey.parse("total")
