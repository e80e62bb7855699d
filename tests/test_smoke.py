"""Minimal smoke tests for project wiring."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.unit


def test_analysis_package_exports_pipeline() -> None:
    """Import the chart engine and verify the public entry point exists."""

    from analysis import build_chart_spec

    assert callable(build_chart_spec)


def test_django_project_loads() -> None:
    """Verify settings register the project apps."""

    from django.conf import settings

    assert "grades.apps.GradesConfig" in settings.INSTALLED_APPS
    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
    assert settings.GRADES_DEFAULT_METRICS == ["scaled-score"]
