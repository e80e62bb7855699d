"""Admin registrations for Grades models."""

from __future__ import annotations

from django.contrib import admin

from grades.models import ExamRecord, Student


class ExamRecordInline(admin.TabularInline):
    """Inline exam records on the student page."""

    model = ExamRecord
    extra = 0
    fields = ("sitting", "sitting_order", "scores")


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    """Admin configuration for Student."""

    list_display = ("student_number", "name", "grade", "class_name")
    list_filter = ("grade", "class_name")
    search_fields = ("student_number", "name")
    inlines = (ExamRecordInline,)


@admin.register(ExamRecord)
class ExamRecordAdmin(admin.ModelAdmin):
    """Admin configuration for ExamRecord."""

    list_display = ("student", "sitting", "sitting_order")
    list_select_related = ("student",)
    search_fields = ("student__name", "student__student_number", "sitting")
