"""
Generic repository - data access for one model over one SQLAlchemy session.

Every mutating call commits exactly once, so each call is its own unit of
work against the database. Reads returned by `search` are detached from the
session: changing them never writes anything back.
"""
import logging
from typing import Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import and_
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from app.database import Base
from app.repositories.criteria import SearchCriteria, SearchKind

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class Repository(Generic[ModelType]):
    """CRUD and criteria search over a single model"""

    model: Type[ModelType]
    filterable_fields: Sequence[str] = ("title",)

    def __init__(
        self,
        db: Session,
        model: Optional[Type[ModelType]] = None,
        filterable_fields: Optional[Sequence[str]] = None
    ):
        self.db = db
        if model is not None:
            self.model = model
        if filterable_fields is not None:
            self.filterable_fields = tuple(filterable_fields)

    def get_all(self) -> List[ModelType]:
        return self.db.query(self.model).all()

    def get_by_id(self, id: int) -> Optional[ModelType]:
        """Return the row with this id, or None"""
        return self.db.get(self.model, id)

    def add(self, entity: ModelType) -> None:
        self.db.add(entity)
        self.save_changes()
        self.db.refresh(entity)
        logger.debug(f"Inserted {self.model.__name__} id={entity.id}")

    def update(self, entity: ModelType) -> None:
        """Overwrite the stored row that has the entity's id"""
        self._require_existing(entity.id)
        self.db.merge(entity)
        self.save_changes()
        logger.debug(f"Updated {self.model.__name__} id={entity.id}")

    def remove(self, entity: ModelType) -> None:
        """
        Delete the row that has the entity's id.
        Foreign keys still pointing at the row make the commit fail;
        nothing is checked beforehand.
        """
        entity_id = entity.id
        instance = entity if entity in self.db else self._require_existing(entity_id)
        self.db.delete(instance)
        self.save_changes()
        logger.debug(f"Deleted {self.model.__name__} id={entity_id}")

    def search(self, criteria: SearchCriteria) -> List[ModelType]:
        condition = self.condition_for(criteria)
        return self.read_only(lambda: self.db.query(self.model).filter(condition).all())

    def save_changes(self) -> None:
        try:
            self.db.commit()
        except Exception:
            logger.error(f"Commit failed for {self.model.__name__}, rolling back", exc_info=True)
            self.db.rollback()
            raise

    def close(self) -> None:
        """Release the session. Calling it again is harmless."""
        self.db.close()

    # ------------------------------------------------------------------

    def condition_for(self, criteria: SearchCriteria):
        """Translate a criterion into a filter on this repository's model"""
        if criteria.field not in self.filterable_fields:
            raise ValueError(
                f"{self.model.__name__} cannot be searched by '{criteria.field}'"
            )

        column = getattr(self.model, criteria.field)

        if criteria.kind == SearchKind.TITLE_CONTAINS:
            return column.contains(criteria.value, autoescape=True)

        condition = column == criteria.value
        if criteria.exclude_id is not None:
            condition = and_(condition, self.model.id != criteria.exclude_id)
        return condition

    def read_only(self, run):
        """
        Run a query and detach whatever it newly loaded into the session.
        Objects that were already attached stay attached.
        """
        before = set(self.db)
        results = run()
        for instance in [obj for obj in self.db if obj not in before]:
            self.db.expunge(instance)
        return results

    def _require_existing(self, id: int) -> ModelType:
        instance = self.db.get(self.model, id)
        if instance is None:
            raise NoResultFound(f"{self.model.__name__} with id={id} does not exist")
        return instance
