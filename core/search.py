"""Student lookup by student number or by (partial) name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from django.urls import reverse

from analysis.selection import StudentIdentity
from grades.models import Student

SearchMode = Literal["number", "name"]


@dataclass(frozen=True, slots=True)
class StudentMatch:
    """A single student search result.

    Attributes:
        student_id: Student primary key.
        student_number: School-issued student number.
        name: Display name.
        grade: Grade label.
        class_name: Class label.
        url: Site-relative URL of the student's chart page.
    """

    student_id: int
    student_number: str
    name: str
    grade: str
    class_name: str
    url: str

    def as_json(self) -> dict[str, object]:
        """Return a JSON-serializable representation."""

        return {
            "id": self.student_id,
            "studentNumber": self.student_number,
            "name": self.name,
            "grade": self.grade,
            "className": self.class_name,
            "url": self.url,
        }


def find_students(*, query: str, mode: SearchMode, limit: int = 50) -> list[StudentMatch]:
    """Return students matching a query.

    Args:
        query: Raw user input; surrounding whitespace is ignored.
        mode: `number` for an exact student-number match, `name` for a
            case-insensitive substring match on the name.
        limit: Maximum number of results.

    Returns:
        Distinct students ordered by name, grade and class. Empty for a blank query.
    """

    text = query.strip()
    if not text:
        return []
    if mode == "number":
        queryset = Student.objects.filter(student_number=text)
    else:
        queryset = Student.objects.filter(name__icontains=text)
    return [_match(student) for student in queryset.order_by("name", "grade", "class_name")[:limit]]


def records_for_student(student: Student) -> list[dict[str, object]]:
    """Return the student's exam records in sitting order."""

    return [record.as_record() for record in student.exam_records.order_by("sitting_order", "sitting", "id")]


def student_identity(student: Student) -> StudentIdentity:
    return StudentIdentity(
        name=student.name,
        grade=student.grade,
        class_name=student.class_name,
        student_id=student.pk,
    )


def _match(student: Student) -> StudentMatch:
    return StudentMatch(
        student_id=student.pk,
        student_number=student.student_number,
        name=student.name,
        grade=student.grade,
        class_name=student.class_name,
        url=reverse("core:student_chart", args=[student.pk]),
    )
