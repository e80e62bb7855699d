"""Django app configuration for Grades."""

from __future__ import annotations

from django.apps import AppConfig


class GradesConfig(AppConfig):
    """AppConfig for stored students and exam records."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "grades"
