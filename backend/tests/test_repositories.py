from datetime import date

from student_management import models
from student_management.repositories import CrudRepository


def test_find_all_on_empty_store_returns_empty_list(session):
    repo = CrudRepository(session, models.Student)
    assert repo.find_all() == []


def test_save_without_id_assigns_identity(session):
    repo = CrudRepository(session, models.Student)
    saved = repo.save(models.Student(first_name="Alice", last_name="Johnson", date_of_birth=date(2001, 5, 3)))
    assert saved.id == 1
    assert saved.first_name == "Alice"
    assert saved.last_name == "Johnson"
    assert saved.date_of_birth == date(2001, 5, 3)
    assert [s.id for s in repo.find_all()] == [1]


def test_save_with_existing_id_replaces_whole_record(session):
    repo = CrudRepository(session, models.Department)
    created = repo.save(models.Department(name="Physics", location="Building C", phone="987-654-3210", head="Dr. Johnson"))
    updated = repo.save(models.Department(id=created.id, name="Physics Updated", location="Building D"))
    assert updated.id == created.id
    assert updated.name == "Physics Updated"
    assert updated.location == "Building D"
    # omitted fields are replaced too, not kept
    assert updated.phone is None
    assert updated.head is None
    assert len(repo.find_all()) == 1


def test_save_with_unknown_id_inserts_under_that_id(session):
    repo = CrudRepository(session, models.Course)
    saved = repo.save(models.Course(id=42, name="Algorithms", code="CS201", credit=6))
    assert saved.id == 42
    assert repo.find_by_id(42).code == "CS201"


def test_find_by_id_missing_returns_none(session):
    repo = CrudRepository(session, models.Enrollment)
    assert repo.find_by_id(999) is None


def test_delete_by_id_removes_record(session):
    repo = CrudRepository(session, models.Course)
    course = repo.save(models.Course(name="Databases", code="CS301"))
    repo.delete_by_id(course.id)
    assert repo.find_by_id(course.id) is None
    assert repo.find_all() == []


def test_delete_by_id_missing_is_noop(session):
    repo = CrudRepository(session, models.Course)
    repo.save(models.Course(name="Databases"))
    repo.delete_by_id(999)
    assert len(repo.find_all()) == 1


def test_enrollment_keeps_grade_status_and_references(session):
    student = CrudRepository(session, models.Student).save(models.Student(first_name="Bob"))
    course = CrudRepository(session, models.Course).save(models.Course(name="Networks"))
    repo = CrudRepository(session, models.Enrollment)
    saved = repo.save(models.Enrollment(
        enrollment_date=date(2024, 3, 10),
        grade=95.5,
        status=models.Status.COMPLETED,
        student_id=student.id,
        course_id=course.id,
    ))
    fetched = repo.find_by_id(saved.id)
    assert fetched.grade == 95.5
    assert fetched.status == models.Status.COMPLETED
    assert fetched.student.first_name == "Bob"
    assert fetched.course.name == "Networks"


def test_enrollment_references_are_optional(session):
    repo = CrudRepository(session, models.Enrollment)
    saved = repo.save(models.Enrollment(grade=45.0, status=models.Status.FAILED))
    assert saved.id is not None
    assert saved.student_id is None
    assert saved.course_id is None


def test_delete_department_leaves_student_reference(session):
    dept = CrudRepository(session, models.Department).save(models.Department(name="Computer Science"))
    students = CrudRepository(session, models.Student)
    dept_id = dept.id
    student_id = students.save(models.Student(first_name="Carol", department_id=dept_id)).id
    CrudRepository(session, models.Department).delete_by_id(dept_id)
    session.expire_all()
    assert students.find_by_id(student_id).department_id == dept_id


def test_delete_student_and_course_leave_enrollment_references(session):
    student = CrudRepository(session, models.Student).save(models.Student(first_name="Bob"))
    course = CrudRepository(session, models.Course).save(models.Course(name="Networks"))
    enrollments = CrudRepository(session, models.Enrollment)
    student_id, course_id = student.id, course.id
    enrollment_id = enrollments.save(models.Enrollment(
        grade=85.5, status=models.Status.ACTIVE, student_id=student_id, course_id=course_id,
    )).id
    # load the collections so the ORM has children it could rewrite
    assert len(student.enrollments) == 1
    assert len(course.enrollments) == 1
    CrudRepository(session, models.Student).delete_by_id(student_id)
    CrudRepository(session, models.Course).delete_by_id(course_id)
    session.expire_all()
    fetched = enrollments.find_by_id(enrollment_id)
    assert fetched.student_id == student_id
    assert fetched.course_id == course_id
