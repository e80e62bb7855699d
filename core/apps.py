"""App configuration for the core Django app."""

from __future__ import annotations

from collections.abc import Iterable

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured

from analysis.theme import PALETTES
from analysis.vocabulary import Metric, Subject


def validate_chart_defaults(*, subjects: Iterable[str], metrics: Iterable[str], theme: str) -> None:
    """Raise ImproperlyConfigured when a chart default is outside the vocabulary."""

    unknown_subjects = [value for value in subjects if value not in {subject.value for subject in Subject}]
    if unknown_subjects:
        raise ImproperlyConfigured(f"GRADES_DEFAULT_SUBJECTS has unknown subjects: {', '.join(unknown_subjects)}")
    unknown_metrics = [value for value in metrics if value not in {metric.value for metric in Metric}]
    if unknown_metrics:
        raise ImproperlyConfigured(f"GRADES_DEFAULT_METRICS has unknown metrics: {', '.join(unknown_metrics)}")
    if theme not in PALETTES:
        raise ImproperlyConfigured(f"GRADES_DEFAULT_THEME must be one of {', '.join(PALETTES)}, got {theme!r}")


class CoreConfig(AppConfig):
    """Configuration for the `core` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Reject chart defaults that the selection form could never clean."""

        from django.conf import settings

        validate_chart_defaults(
            subjects=settings.GRADES_DEFAULT_SUBJECTS,
            metrics=settings.GRADES_DEFAULT_METRICS,
            theme=settings.GRADES_DEFAULT_THEME,
        )
