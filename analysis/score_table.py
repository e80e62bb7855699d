"""Per-sitting score table shown under the chart."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .vocabulary import RAW_SCORE, SUBJECT_LABELS, TIME_AXIS_KEY, Metric, Subject


@dataclass(frozen=True, slots=True)
class SubjectScores:
    """One subject's values for one sitting; None where not recorded."""

    subject: Subject
    label: str
    scaled_score: object
    raw_score: object
    school_rank: object
    class_rank: object
    joint_exam_rank: object


@dataclass(frozen=True, slots=True)
class ScoreTableRow:
    """All requested subjects for one sitting."""

    sitting: str
    subjects: tuple[SubjectScores, ...]


def score_table(records: Sequence[Mapping[str, object]], subjects: Iterable[Subject]) -> tuple[ScoreTableRow, ...]:
    """Build display rows for the given subjects, in record order.

    Records without a sitting are shown with an empty sitting label; the
    chart pipeline is where they are rejected.
    """

    ordered = tuple(dict.fromkeys(subjects))
    rows: list[ScoreTableRow] = []
    for record in records:
        rows.append(
            ScoreTableRow(
                sitting=str(record.get(TIME_AXIS_KEY) or ""),
                subjects=tuple(_subject_scores(record, subject) for subject in ordered),
            )
        )
    return tuple(rows)


def _subject_scores(record: Mapping[str, object], subject: Subject) -> SubjectScores:
    def value(metric: str) -> object:
        return record.get(f"{subject.value}_{metric}")

    return SubjectScores(
        subject=subject,
        label=SUBJECT_LABELS[subject],
        scaled_score=value(Metric.scaled_score.value),
        raw_score=value(RAW_SCORE),
        school_rank=value(Metric.school_rank.value),
        class_rank=value(Metric.class_rank.value),
        joint_exam_rank=value(Metric.joint_exam_rank.value),
    )
