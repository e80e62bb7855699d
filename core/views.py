"""Views for student search and the per-student score chart."""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, render

from analysis.chart_spec import ChartSpec
from analysis.dataset import DataIntegrityError
from analysis.score_table import score_table
from analysis.selection import SelectionState, chart_spec_for_state, select_student
from core.charting.echarts import build_echarts_option
from core.forms import ChartSelectionForm, StudentSearchForm
from core.search import find_students, records_for_student, student_identity
from grades.models import Student

logger = logging.getLogger(__name__)


@login_required
def search(request: HttpRequest) -> HttpResponse:
    """Render the student search page."""

    form = StudentSearchForm(request.GET or None)
    results = []
    query = ""
    if form.is_bound and form.is_valid():
        query = form.cleaned_data["q"]
        results = find_students(query=query, mode=form.cleaned_data["mode"], limit=settings.GRADES_SEARCH_LIMIT)
    return render(
        request,
        "core/search.html",
        {"form": form, "query": query, "results": results, "searched": bool(query)},
    )


@login_required
def search_api(request: HttpRequest) -> JsonResponse:
    """Return JSON student search results."""

    form = StudentSearchForm(request.GET)
    if not form.is_valid():
        return JsonResponse({"ok": False, "errors": form.errors.get_json_data()}, status=400)
    query = form.cleaned_data["q"]
    mode = form.cleaned_data["mode"]
    if not query:
        return JsonResponse({"query": "", "mode": mode, "results": []})
    results = find_students(query=query, mode=mode, limit=settings.GRADES_SEARCH_LIMIT)
    return JsonResponse({"query": query, "mode": mode, "results": [item.as_json() for item in results]})


@login_required
def student_chart(request: HttpRequest, student_id: int) -> HttpResponse:
    """Render a student's score chart, selection controls and records table."""

    student = get_object_or_404(Student, pk=student_id)
    records = records_for_student(student)
    form = ChartSelectionForm(request.GET or _default_selection())

    option = None
    error = None
    subjects = ()
    theme = settings.GRADES_DEFAULT_THEME
    if form.is_valid():
        subjects = form.cleaned_data["subjects"]
        theme = form.cleaned_data["theme"]
        try:
            spec = _chart_spec(student, records, form)
        except DataIntegrityError as exc:
            logger.warning("Chart for student %s aborted: %s", student.pk, exc)
            error = str(exc)
        else:
            option = build_echarts_option(spec) if spec is not None else None
    else:
        error = "Invalid chart selection."

    return render(
        request,
        "core/student_chart.html",
        {
            "student": student,
            "form": form,
            "chart_option": option,
            "chart_theme": theme,
            "chart_error": error,
            "record_count": len(records),
            "score_rows": score_table(records, subjects),
        },
    )


@login_required
def student_chart_api(request: HttpRequest, student_id: int) -> JsonResponse:
    """Return the chart spec and ECharts option for a student selection."""

    student = get_object_or_404(Student, pk=student_id)
    form = ChartSelectionForm(request.GET)
    if not form.is_valid():
        return JsonResponse({"ok": False, "errors": form.errors.get_json_data()}, status=400)

    records = records_for_student(student)
    try:
        spec = _chart_spec(student, records, form)
    except DataIntegrityError as exc:
        logger.warning("Chart for student %s aborted: %s", student.pk, exc)
        return JsonResponse({"ok": False, "error": str(exc)}, status=422)

    if spec is None:
        return JsonResponse({"ok": True, "state": "empty"})
    return JsonResponse(
        {
            "ok": True,
            "state": "ready",
            "spec": spec.as_json(),
            "option": build_echarts_option(spec),
        }
    )


def _default_selection() -> dict[str, object]:
    """Return form data for a first visit so the controls show the defaults."""

    return {
        "applied": "on",
        "subjects": list(settings.GRADES_DEFAULT_SUBJECTS),
        "metrics": list(settings.GRADES_DEFAULT_METRICS),
        "theme": settings.GRADES_DEFAULT_THEME,
    }


def _chart_spec(student: Student, records: list[dict[str, object]], form: ChartSelectionForm) -> ChartSpec | None:
    """Run the chart pipeline for a validated selection form."""

    state = select_student(
        SelectionState(theme=form.cleaned_data["theme"]),
        student_identity(student),
        records,
        subjects=form.cleaned_data["subjects"],
        metrics=form.cleaned_data["metrics"],
    )
    return chart_spec_for_state(state)
