"""Database models for students and their per-sitting exam records."""

from __future__ import annotations

from numbers import Real

from django.core.exceptions import ValidationError
from django.db import models

from analysis.vocabulary import TIME_AXIS_KEY, record_field_names

RECORD_FIELD_NAMES = record_field_names()


class Student(models.Model):
    """A student whose exam history can be looked up and charted."""

    student_number = models.CharField(max_length=32, unique=True)
    name = models.CharField(max_length=64, db_index=True)
    grade = models.CharField(max_length=32)
    class_name = models.CharField(max_length=32)

    class Meta:
        verbose_name = "Student"
        verbose_name_plural = "Students"
        ordering = ["name", "grade", "class_name"]

    def __str__(self) -> str:
        """Return a concise display string for admin/debug usage."""

        return f"{self.name} ({self.grade} {self.class_name})"


class ExamRecord(models.Model):
    """One exam sitting for one student.

    `scores` is a sparse mapping of `<subject>_<metric>` field names to
    numbers; electives that were not taken are simply absent.
    """

    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name="exam_records")
    sitting = models.CharField(max_length=64, help_text="Exam sitting label shown on the chart's category axis.")
    sitting_order = models.PositiveIntegerField(
        default=0,
        help_text="Chronological position of the sitting; records are charted in this order.",
    )
    scores = models.JSONField(default=dict, blank=True)

    class Meta:
        verbose_name = "Exam Record"
        verbose_name_plural = "Exam Records"
        ordering = ["sitting_order", "sitting"]
        constraints = [
            models.UniqueConstraint(fields=["student", "sitting"], name="uniq_student_exam_sitting"),
        ]

    def __str__(self) -> str:
        """Return a concise display string for admin/debug usage."""

        return f"ExamRecord(student={self.student_id}, sitting={self.sitting!r})"

    def clean(self) -> None:
        """Reject score keys outside the vocabulary and non-numeric values."""

        if not isinstance(self.scores, dict):
            raise ValidationError({"scores": "Scores must be a mapping of field names to numbers."})
        unknown = sorted(set(self.scores) - RECORD_FIELD_NAMES)
        if unknown:
            raise ValidationError({"scores": f"Unknown score fields: {unknown}."})
        invalid = sorted(
            key
            for key, value in self.scores.items()
            if value is not None and (isinstance(value, bool) or not isinstance(value, Real))
        )
        if invalid:
            raise ValidationError({"scores": f"Non-numeric score values for: {invalid}."})

    def save(self, *args, **kwargs) -> None:
        """Save after validating the score mapping."""

        self.full_clean()
        super().save(*args, **kwargs)

    def as_record(self) -> dict[str, object]:
        """Return the flat mapping consumed by the chart pipeline."""

        record: dict[str, object] = {TIME_AXIS_KEY: self.sitting}
        record.update(self.scores)
        return record
