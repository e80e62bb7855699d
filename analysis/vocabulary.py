"""Closed subject/metric vocabulary for exam records.

Records are wide mappings keyed by `<subject>_<metric>` strings. The enums
below are the only names the chart engine resolves, so field-key construction
and rank/score classification are total over the vocabulary.
"""

from __future__ import annotations

from enum import StrEnum

TIME_AXIS_KEY = "sitting"
RAW_SCORE = "raw-score"


class Subject(StrEnum):
    """Academic subject recorded per exam sitting.

    `total` is the aggregate across all subjects.
    """

    language = "language"
    math = "math"
    english = "english"
    physics = "physics"
    chemistry = "chemistry"
    biology = "biology"
    history = "history"
    politics = "politics"
    geography = "geography"
    total = "total"


class MetricFamily(StrEnum):
    """Axis family a metric belongs to."""

    magnitude = "magnitude"
    rank = "rank"


class Metric(StrEnum):
    """Chartable measurement recorded per subject per sitting."""

    scaled_score = "scaled-score"
    school_rank = "school-rank"
    class_rank = "class-rank"
    joint_exam_rank = "joint-exam-rank"

    @property
    def family(self) -> MetricFamily:
        """Return the axis family for this metric."""

        return METRIC_FAMILIES[self]


METRIC_FAMILIES: dict[Metric, MetricFamily] = {
    Metric.scaled_score: MetricFamily.magnitude,
    Metric.school_rank: MetricFamily.rank,
    Metric.class_rank: MetricFamily.rank,
    Metric.joint_exam_rank: MetricFamily.rank,
}

METRIC_LABELS: dict[Metric, str] = {
    Metric.scaled_score: "Scaled score",
    Metric.school_rank: "School rank",
    Metric.class_rank: "Class rank",
    Metric.joint_exam_rank: "Joint-exam rank",
}

SUBJECT_LABELS: dict[Subject, str] = {
    Subject.language: "Language",
    Subject.math: "Math",
    Subject.english: "English",
    Subject.physics: "Physics",
    Subject.chemistry: "Chemistry",
    Subject.biology: "Biology",
    Subject.history: "History",
    Subject.politics: "Politics",
    Subject.geography: "Geography",
    Subject.total: "Total",
}


def record_field_names() -> frozenset[str]:
    """Return every score field name a stored record may carry.

    This covers the chartable metrics plus the display-only raw score.
    """

    names = {f"{subject.value}_{metric.value}" for subject in Subject for metric in Metric}
    names.update(f"{subject.value}_{RAW_SCORE}" for subject in Subject)
    return frozenset(names)
