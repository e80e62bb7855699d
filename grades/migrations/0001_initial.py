"""Create Student and ExamRecord tables."""

from __future__ import annotations

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """Initial schema for the grades app."""

    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Student",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("student_number", models.CharField(max_length=32, unique=True)),
                ("name", models.CharField(db_index=True, max_length=64)),
                ("grade", models.CharField(max_length=32)),
                ("class_name", models.CharField(max_length=32)),
            ],
            options={
                "verbose_name": "Student",
                "verbose_name_plural": "Students",
                "ordering": ["name", "grade", "class_name"],
            },
        ),
        migrations.CreateModel(
            name="ExamRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "sitting",
                    models.CharField(
                        help_text="Exam sitting label shown on the chart's category axis.",
                        max_length=64,
                    ),
                ),
                (
                    "sitting_order",
                    models.PositiveIntegerField(
                        default=0,
                        help_text="Chronological position of the sitting; records are charted in this order.",
                    ),
                ),
                ("scores", models.JSONField(blank=True, default=dict)),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="exam_records",
                        to="grades.student",
                    ),
                ),
            ],
            options={
                "verbose_name": "Exam Record",
                "verbose_name_plural": "Exam Records",
                "ordering": ["sitting_order", "sitting"],
                "constraints": [
                    models.UniqueConstraint(fields=("student", "sitting"), name="uniq_student_exam_sitting"),
                ],
            },
        ),
    ]
