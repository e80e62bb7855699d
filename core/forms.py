"""Forms for student search and chart selection."""

from __future__ import annotations

from django import forms
from django.conf import settings

from analysis.vocabulary import METRIC_LABELS, SUBJECT_LABELS, Metric, Subject


class StudentSearchForm(forms.Form):
    """Look up students by student number or by name."""

    q = forms.CharField(required=False, max_length=64, label="Search")
    mode = forms.ChoiceField(
        required=False,
        choices=(("number", "Student number"), ("name", "Name")),
        initial="number",
        label="Search by",
    )

    def clean_q(self) -> str:
        """Strip surrounding whitespace."""

        return (self.cleaned_data.get("q") or "").strip()

    def clean_mode(self) -> str:
        """Default to a student-number lookup."""

        return self.cleaned_data.get("mode") or "number"


class ChartSelectionForm(forms.Form):
    """Validate the subject/metric selection for a student chart.

    Submitted order is preserved: it becomes the legend and series order.
    The configured defaults apply only on a first visit: no `applied` flag and
    neither `subjects` nor `metrics` submitted. The `applied` flag lets the
    page submit an intentionally empty selection.
    """

    applied = forms.BooleanField(required=False, widget=forms.HiddenInput, initial=True)
    subjects = forms.MultipleChoiceField(
        required=False,
        choices=[(subject.value, SUBJECT_LABELS[subject]) for subject in Subject],
        widget=forms.CheckboxSelectMultiple,
        label="Subjects",
    )
    metrics = forms.MultipleChoiceField(
        required=False,
        choices=[(metric.value, METRIC_LABELS[metric]) for metric in Metric],
        widget=forms.CheckboxSelectMultiple,
        label="Metrics",
    )
    theme = forms.ChoiceField(
        required=False,
        choices=(("light", "Light"), ("dark", "Dark")),
        label="Theme",
    )

    def clean(self) -> dict[str, object]:
        """Convert selections into vocabulary enums, applying defaults on first visit."""

        cleaned = super().clean()
        if self.errors:
            return cleaned

        submitted = cleaned.get("applied") or "subjects" in self.data or "metrics" in self.data
        if submitted:
            subjects = cleaned.get("subjects") or []
            metrics = cleaned.get("metrics") or []
        else:
            subjects = list(settings.GRADES_DEFAULT_SUBJECTS)
            metrics = list(settings.GRADES_DEFAULT_METRICS)

        cleaned["subjects"] = tuple(dict.fromkeys(Subject(value) for value in subjects))
        cleaned["metrics"] = tuple(dict.fromkeys(Metric(value) for value in metrics))
        cleaned["theme"] = cleaned.get("theme") or settings.GRADES_DEFAULT_THEME
        return cleaned
