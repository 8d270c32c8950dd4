"""
Generic Document Repository

AbstractRepository gives every entity type create, find, update, upsert
and transaction-start operations over one MongoDB collection. Concrete
repositories compose it with their own CollectionModel, connection and
logger instead of re-implementing persistence logic.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Mapping, NoReturn, Optional

from bson import ObjectId
from pymongo import ReturnDocument

from docrepo.database.model import CollectionModel, DocumentInput, TDocument, ID_FIELD
from docrepo.database.transaction import TransactionScope, begin_transaction
from docrepo.utils.error_handler import DocumentNotFoundError


@dataclass
class SaveOptions:
    """Options forwarded to insert_one when creating a document"""
    session: Any = None
    bypass_document_validation: bool = False
    comment: Optional[str] = None

    def to_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "session": self.session,
            "bypass_document_validation": self.bypass_document_validation,
        }
        if self.comment is not None:
            kwargs["comment"] = self.comment
        return kwargs


class AbstractRepository(Generic[TDocument]):
    """
    Uniform CRUD and transaction-start surface for one document type.

    Args:
        model: CollectionModel bound to the entity's collection
        connection: client used only to start sessions
        logger: logger for not-found diagnostics (module logger by default)

    Every read returns a plain snapshot. A filter that matches nothing
    raises DocumentNotFoundError after a warning is logged; every other
    failure is pymongo's own and propagates unchanged.
    """

    def __init__(
        self,
        model: CollectionModel[TDocument],
        connection: Any,
        logger: Optional[logging.Logger] = None,
    ):
        self.model = model
        self.connection = connection
        self.logger = logger or logging.getLogger(__name__)

    async def create(self, document: DocumentInput, options: Optional[SaveOptions] = None) -> TDocument:
        """Insert a new document under a freshly generated ObjectId"""
        options = options or SaveOptions()
        created = self.model.build({
            **self.model.fields_of(document),
            ID_FIELD: ObjectId(),
        })
        record = self.model.to_record(created)

        await self.model.collection.insert_one(record, **options.to_kwargs())

        return self.model.build(record)

    async def find_one(self, filter_query: Mapping[str, Any], *, session: Any = None) -> TDocument:
        """Return the first document matching filter_query"""
        document = await self.model.collection.find_one(
            self.model.cast_filter(filter_query),
            session=session,
        )

        if document is None:
            self._not_found(filter_query)

        return self.model.snapshot(document)

    async def find_one_and_update(
        self,
        filter_query: Mapping[str, Any],
        update: DocumentInput,
        *,
        session: Any = None,
    ) -> TDocument:
        """Atomically apply update to the first match and return the updated document"""
        document = await self.model.collection.find_one_and_update(
            self.model.cast_filter(filter_query),
            self.model.to_update(update),
            return_document=ReturnDocument.AFTER,
            session=session,
        )

        if document is None:
            self._not_found(filter_query)

        return self.model.snapshot(document)

    async def upsert(
        self,
        filter_query: Mapping[str, Any],
        document: DocumentInput,
        *,
        session: Any = None,
    ) -> TDocument:
        """Update the first match with document's fields, inserting when nothing matches"""
        upserted = await self.model.collection.find_one_and_update(
            self.model.cast_filter(filter_query),
            {"$set": self.model.fields_of(document)},
            return_document=ReturnDocument.AFTER,
            upsert=True,
            session=session,
        )

        # Unreachable with upsert=True against a conforming server
        if upserted is None:
            self._not_found(filter_query)

        return self.model.snapshot(upserted)

    async def start_transaction(self) -> Any:
        """
        Open a session and start a transaction on it.

        The caller owns the returned session: it must commit or abort the
        transaction on every exit path and then end the session. Prefer
        transaction(), which does all three.
        """
        return await begin_transaction(self.connection)

    def transaction(self) -> TransactionScope:
        """Scoped transaction that commits, aborts and releases on exit"""
        return TransactionScope(self.connection, logger=self.logger)

    def _not_found(self, filter_query: Mapping[str, Any]) -> NoReturn:
        self.logger.warning(
            "Document not found for filter: %s",
            filter_query,
            extra={"filter_query": filter_query},
        )
        raise DocumentNotFoundError(filter_query)
