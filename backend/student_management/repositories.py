"""Repository classes encapsulating database operations.

A single generic `CrudRepository` is bound to one table model per
instance; the four entity repositories are instances of it rather than
separate classes. Repositories return SQLModel objects and perform
commits/refreshes where appropriate.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlmodel import Session, SQLModel, select

ModelT = TypeVar("ModelT", bound=SQLModel)


class CrudRepository(Generic[ModelT]):
    """find-all / find-by-id / save / delete-by-id for one table model."""
    def __init__(self, session: Session, model: Type[ModelT]):
        self.session = session
        self.model = model

    def find_all(self) -> List[ModelT]:
        """Return every row, in the store's default order."""
        return list(self.session.exec(select(self.model)).all())

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Return the row with primary key `entity_id` or `None`."""
        return self.session.get(self.model, entity_id)

    def save(self, entity: ModelT) -> ModelT:
        """Insert or replace `entity` and return the managed instance.

        Without an id the entity is inserted and the database assigns
        one. With an id every column of the stored row is overwritten by
        the given values (no partial patching); if no row carries that id
        it is inserted under it.
        """
        if entity.id is None:
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
            return entity
        merged = self.session.merge(entity)
        self.session.commit()
        self.session.refresh(merged)
        return merged

    def delete_by_id(self, entity_id: int) -> None:
        """Delete the row with primary key `entity_id`; absent ids are a no-op."""
        entity = self.session.get(self.model, entity_id)
        if entity is None:
            return
        self.session.delete(entity)
        self.session.commit()
