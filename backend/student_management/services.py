"""Services used by HTTP controllers.

Services are pass-through: they forward each call to a repository and
return its result unchanged. A missing record is reported as `None`
rather than an exception, and persistence errors propagate to the caller.
"""

import logging
from typing import Generic, List, Optional, Type

from sqlmodel import Session

from . import models, repositories
from .repositories import ModelT

logger = logging.getLogger("student_management.services")


class CrudService(Generic[ModelT]):
    """get-all / get-by-id / save / delete-by-id over a `CrudRepository`."""
    def __init__(self, repository: repositories.CrudRepository[ModelT]):
        self.repository = repository

    def get_all(self) -> List[ModelT]:
        return self.repository.find_all()

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Return the entity or `None` when no record has `entity_id`."""
        return self.repository.find_by_id(entity_id)

    def save(self, entity: ModelT) -> ModelT:
        """Insert (no id) or fully replace (id set) and return the stored entity."""
        saved = self.repository.save(entity)
        logger.debug("saved %s id=%s", type(saved).__name__, saved.id)
        return saved

    def delete_by_id(self, entity_id: int) -> None:
        self.repository.delete_by_id(entity_id)
        logger.debug("deleted %s id=%s", self.repository.model.__name__, entity_id)


def crud_service(session: Session, model: Type[ModelT]) -> CrudService[ModelT]:
    """Build a `CrudService` for `model` on top of `session`."""
    return CrudService(repositories.CrudRepository(session, model))


def student_service(session: Session) -> CrudService[models.Student]:
    return crud_service(session, models.Student)


def department_service(session: Session) -> CrudService[models.Department]:
    return crud_service(session, models.Department)


def course_service(session: Session) -> CrudService[models.Course]:
    return crud_service(session, models.Course)


def enrollment_service(session: Session) -> CrudService[models.Enrollment]:
    return crud_service(session, models.Enrollment)
