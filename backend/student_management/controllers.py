"""HTTP controllers for the four resource types.

Controllers are intentionally thin: `build_crud_router` maps each REST
verb to exactly one service call and lets FastAPI/pydantic handle JSON
(de)serialization. The routers share one implementation and differ only
in the table model, the request schema and the service dependency.

Routes per resource prefix:
- GET    /{prefix}        -> get_all
- GET    /{prefix}/{id}   -> get_by_id (JSON `null` when absent)
- POST   /{prefix}        -> save
- PUT    /{prefix}        -> save (identity carried in the body)
- DELETE /{prefix}/{id}   -> delete_by_id
"""

from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session, SQLModel

from . import models, schemas, services
from .database import get_session
from .services import CrudService


def get_student_service(db: Session = Depends(get_session)) -> CrudService:
    return services.student_service(db)


def get_department_service(db: Session = Depends(get_session)) -> CrudService:
    return services.department_service(db)


def get_course_service(db: Session = Depends(get_session)) -> CrudService:
    return services.course_service(db)


def get_enrollment_service(db: Session = Depends(get_session)) -> CrudService:
    return services.enrollment_service(db)


def build_crud_router(
    prefix: str,
    model: Type[SQLModel],
    payload_schema: Type[SQLModel],
    get_service: Callable[..., CrudService],
) -> APIRouter:
    """Return an `APIRouter` exposing list/get/create/update/delete for `model`."""
    router = APIRouter(prefix=prefix, tags=[prefix.strip('/')])

    @router.get('', response_model=List[model])
    def list_all(service: CrudService = Depends(get_service)):
        """Return every stored record; an empty list when there are none."""
        return service.get_all()

    @router.get('/{entity_id}', response_model=Optional[model])
    def get_one(entity_id: int, service: CrudService = Depends(get_service)):
        """Return one record by id, or `null` if it does not exist."""
        return service.get_by_id(entity_id)

    @router.post('', response_model=model)
    def create(payload: payload_schema, service: CrudService = Depends(get_service)):
        """Persist a new record and return it with its assigned id."""
        return service.save(model.model_validate(payload))

    @router.put('', response_model=model)
    def update(payload: payload_schema, service: CrudService = Depends(get_service)):
        """Replace the stored record identified by `payload.id` with `payload`."""
        return service.save(model.model_validate(payload))

    @router.delete('/{entity_id}', response_class=Response)
    def delete(entity_id: int, service: CrudService = Depends(get_service)):
        """Delete a record by id; unknown ids are accepted silently."""
        service.delete_by_id(entity_id)
        return Response(status_code=200)

    return router


student_router = build_crud_router('/students', models.Student, schemas.StudentIn, get_student_service)
department_router = build_crud_router('/departments', models.Department, schemas.DepartmentIn, get_department_service)
course_router = build_crud_router('/courses', models.Course, schemas.CourseIn, get_course_service)
enrollment_router = build_crud_router('/enrollments', models.Enrollment, schemas.EnrollmentIn, get_enrollment_service)
