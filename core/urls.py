"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.search, name="home"),
    path("search/", views.search, name="search"),
    path("api/search/", views.search_api, name="search_api"),
    path("students/<int:student_id>/", views.student_chart, name="student_chart"),
    path("api/students/<int:student_id>/chart/", views.student_chart_api, name="student_chart_api"),
]
