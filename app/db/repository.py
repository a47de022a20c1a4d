import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.core.exceptions import AliasExistsError, AliasNotFoundError, StorageError
from app.db.Models.models import URLMapping

logger = logging.getLogger(__name__)


class URLStorage:
    """
    Durable alias -> URL mapping backed by SQLAlchemy.

    A single instance is shared by every handler. Each operation opens its
    own session, so every call is one implicit transaction; pooling is left
    to the engine behind ``session_factory``.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def save_url(self, url_to_save: str, alias: str) -> int:
        """
        Insert a new mapping and return its id.

        Uniqueness is enforced by the UNIQUE constraint on ``alias``; there
        is no lookup before the insert.

        Raises:
            AliasExistsError: the alias is already taken.
            StorageError: any other database failure.
        """
        op = "storage.sqlite.save_url"

        with self._session_factory() as session:
            item = URLMapping(alias=alias, url=url_to_save)
            try:
                session.add(item)
                session.commit()
                url_id = item.id
            except IntegrityError as e:
                session.rollback()
                error_msg = str(e.orig).lower() if hasattr(e, 'orig') else str(e).lower()
                if "unique" in error_msg:
                    raise AliasExistsError(alias) from e
                raise StorageError(op, e) from e
            except SQLAlchemyError as e:
                session.rollback()
                raise StorageError(op, e) from e

        return url_id

    def get_url(self, alias: str) -> str:
        """Return the target URL for ``alias`` or raise AliasNotFoundError."""
        op = "storage.sqlite.get_url"

        with self._session_factory() as session:
            try:
                row = session.query(URLMapping.url).filter(URLMapping.alias == alias).first()
            except SQLAlchemyError as e:
                raise StorageError(op, e) from e

        if row is None:
            raise AliasNotFoundError(alias)
        return row.url

    def delete_url(self, alias: str) -> None:
        """Remove the mapping for ``alias``; a missing alias raises AliasNotFoundError."""
        op = "storage.sqlite.delete_url"

        with self._session_factory() as session:
            try:
                deleted = session.query(URLMapping).filter(URLMapping.alias == alias).delete()
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                raise StorageError(op, e) from e

        if not deleted:
            raise AliasNotFoundError(alias)
        logger.debug(f"Deleted mapping for alias {alias}")
