"""SQLModel data models.

This module defines the application's database tables using SQLModel.
Every entity is split into a `*Base` class holding the descriptive
columns (shared with the request schemas) and the table class that adds
the integer primary key and ORM relationships.

References between entities are plain nullable foreign keys: the JSON
wire format carries `student_id`, `course_id` and `department_id`, while
the `Relationship` attributes are only used for navigation inside the
application. Deleting a referenced row leaves the children's foreign
keys untouched; any integrity action is up to the database.
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from sqlmodel import SQLModel, Field, Relationship


class Status(str, Enum):
    """Lifecycle state of an `Enrollment`."""
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class DepartmentBase(SQLModel):
    name: Optional[str] = Field(default=None, index=True)
    location: Optional[str] = None
    phone: Optional[str] = None
    head: Optional[str] = None


class Department(DepartmentBase, table=True):
    """An academic department.

    `head` is a free-form description of the department head, not a
    reference to another record.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    students: List['Student'] = Relationship(back_populates='department', sa_relationship_kwargs={'passive_deletes': 'all'})


class StudentBase(SQLModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = Field(default=None, index=True)
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    department_id: Optional[int] = Field(default=None, foreign_key='department.id')


class Student(StudentBase, table=True):
    """A registered student, optionally attached to a `Department`."""
    id: Optional[int] = Field(default=None, primary_key=True)
    department: Optional[Department] = Relationship(back_populates='students')
    enrollments: List['Enrollment'] = Relationship(back_populates='student', sa_relationship_kwargs={'passive_deletes': 'all'})


class CourseBase(SQLModel):
    name: Optional[str] = Field(default=None, index=True)
    code: Optional[str] = None
    credit: Optional[int] = None
    description: Optional[str] = None


class Course(CourseBase, table=True):
    """A course students can enroll in."""
    id: Optional[int] = Field(default=None, primary_key=True)
    enrollments: List['Enrollment'] = Relationship(back_populates='course', sa_relationship_kwargs={'passive_deletes': 'all'})


class EnrollmentBase(SQLModel):
    enrollment_date: Optional[date] = None
    grade: Optional[float] = None
    status: Optional[Status] = None
    student_id: Optional[int] = Field(default=None, foreign_key='student.id')
    course_id: Optional[int] = Field(default=None, foreign_key='course.id')


class Enrollment(EnrollmentBase, table=True):
    """Links one `Student` to one `Course` with a grade and a `Status`.

    Both references are nullable; the store's own foreign key handling is
    the only referential check.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    student: Optional[Student] = Relationship(back_populates='enrollments')
    course: Optional[Course] = Relationship(back_populates='enrollments')
