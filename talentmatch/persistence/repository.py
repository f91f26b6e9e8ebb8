"""Keyed record access shared by the registry services."""
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from talentmatch.persistence.models import Base

ModelT = TypeVar("ModelT", bound=Base)


class KeyedRepository(Generic[ModelT]):
    """Create/read/update/delete for a table keyed by identity (or identity pair).

    Each write commits immediately: one public operation is one transaction.
    Repositories do not validate or decide anything.
    """

    def __init__(self, session: Session, model: type[ModelT]):
        self.session = session
        self.model = model

    def get(self, key: Any) -> Optional[ModelT]:
        """Return the record stored under key, or None."""
        return self.session.get(self.model, key)

    def exists(self, key: Any) -> bool:
        return self.get(key) is not None

    def add(self, record: ModelT) -> ModelT:
        """Insert a new record.

        Raises:
            IntegrityError: If the key was taken by a concurrent writer.
                The session is rolled back before re-raising.
        """
        self.session.add(record)
        self._commit()
        return record

    def save(self, record: ModelT) -> ModelT:
        """Persist changes made to an already-loaded record."""
        self._commit()
        return record

    def delete(self, record: ModelT) -> None:
        self.session.delete(record)
        self._commit()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
