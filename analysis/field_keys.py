"""Compound field keys combining a subject and a metric."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .vocabulary import Metric, MetricFamily, Subject


@dataclass(frozen=True, slots=True)
class FieldKey:
    """A typed `<subject>_<metric>` record field.

    Attributes:
        subject: Subject half of the key.
        metric: Metric half of the key.
    """

    subject: Subject
    metric: Metric

    @property
    def key(self) -> str:
        """Return the record field name, e.g. `total_scaled-score`."""

        return f"{self.subject.value}_{self.metric.value}"

    @property
    def family(self) -> MetricFamily:
        """Return the axis family of the metric half."""

        return self.metric.family

    def __str__(self) -> str:
        return self.key

    @classmethod
    def parse(cls, text: str) -> "FieldKey":
        """Parse a record field name back into a FieldKey.

        Subjects never contain underscores, so the first underscore splits the
        two halves.

        Raises:
            ValueError: When either half is outside the vocabulary.
        """

        subject, sep, metric = text.partition("_")
        if not sep:
            raise ValueError(f"Field key {text!r} is missing the subject/metric separator.")
        return cls(subject=Subject(subject), metric=Metric(metric))


def resolve_field_keys(subjects: Iterable[Subject], metrics: Iterable[Metric]) -> tuple[FieldKey, ...]:
    """Return the cross product of subjects and metrics.

    Subjects form the outer loop and metrics the inner loop, both in the order
    supplied. Repeated entries collapse to their first occurrence.

    Args:
        subjects: Ordered selected subjects.
        metrics: Ordered selected metrics.

    Returns:
        Field keys in legend/series order, or an empty tuple when either
        selection is empty.
    """

    ordered_subjects = tuple(dict.fromkeys(subjects))
    ordered_metrics = tuple(dict.fromkeys(metrics))
    return tuple(
        FieldKey(subject=subject, metric=metric) for subject in ordered_subjects for metric in ordered_metrics
    )
