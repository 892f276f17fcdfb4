"""Pydantic request schemas used by the API.

Request payloads reuse the `*Base` column definitions from `models` and
add an optional `id`: create requests normally omit it, update requests
carry the identity of the record being replaced. Responses are the table
models themselves.
"""

from typing import Optional

from .models import CourseBase, DepartmentBase, EnrollmentBase, StudentBase


class StudentIn(StudentBase):
    """Full student record as sent by clients."""
    id: Optional[int] = None


class DepartmentIn(DepartmentBase):
    """Full department record as sent by clients."""
    id: Optional[int] = None


class CourseIn(CourseBase):
    """Full course record as sent by clients."""
    id: Optional[int] = None


class EnrollmentIn(EnrollmentBase):
    """Full enrollment record as sent by clients.

    `status` is validated against `models.Status`; unknown values are
    rejected before the request reaches a service.
    """
    id: Optional[int] = None
