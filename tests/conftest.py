"""
Pytest configuration and shared fixtures.

This module provides:
- An in-memory stand-in for a pymongo AsyncCollection covering the
  query shapes the repository issues
- Fake client and session objects recording the transaction lifecycle
- A concrete Widget entity and its repository
"""

import copy
import logging
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from pydantic import Field
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from docrepo.database import AbstractRepository, CollectionModel
from docrepo.schema import AbstractDocument


class Widget(AbstractDocument):
    """Entity used across the repository tests"""
    name: str
    count: int = 0
    tags: List[str] = Field(default_factory=list)
    note: Optional[str] = None


class WidgetRepository(AbstractRepository[Widget]):
    """Concrete repository composing the generic core with its own logger"""

    def __init__(self, model: CollectionModel[Widget], connection: Any):
        super().__init__(model, connection, logger=logging.getLogger("tests.widgets"))


class FakeCollection:
    """Equality-filter, insertion-ordered collection kept in memory"""

    def __init__(self, name: str = "widgets"):
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.calls: List[tuple] = []

    async def insert_one(self, document, session=None, bypass_document_validation=False, comment=None):
        self.calls.append(("insert_one", {
            "session": session,
            "bypass_document_validation": bypass_document_validation,
            "comment": comment,
        }))
        if any(stored["_id"] == document["_id"] for stored in self.documents):
            raise DuplicateKeyError("E11000 duplicate key error")
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"], acknowledged=True)

    async def find_one(self, filter, session=None):
        self.calls.append(("find_one", {"filter": filter, "session": session}))
        match = self._match(filter)
        return copy.deepcopy(match) if match is not None else None

    async def find_one_and_update(
        self,
        filter,
        update,
        return_document=ReturnDocument.BEFORE,
        upsert=False,
        session=None,
    ):
        self.calls.append(("find_one_and_update", {
            "filter": filter,
            "update": update,
            "return_document": return_document,
            "upsert": upsert,
            "session": session,
        }))
        match = self._match(filter)
        if match is None:
            if not upsert:
                return None
            match = {key: value for key, value in filter.items() if not key.startswith("$")}
            match.setdefault("_id", ObjectId())
            self._apply(match, update)
            self.documents.append(match)
            return copy.deepcopy(match) if return_document == ReturnDocument.AFTER else None

        before = copy.deepcopy(match)
        self._apply(match, update)
        return copy.deepcopy(match) if return_document == ReturnDocument.AFTER else before

    def _match(self, filter) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if all(document.get(key) == value for key, value in filter.items()):
                return document
        return None

    @staticmethod
    def _apply(document: Dict[str, Any], update: Dict[str, Any]) -> None:
        for operator, fields in update.items():
            if operator == "$set":
                document.update(copy.deepcopy(fields))
            elif operator == "$inc":
                for key, amount in fields.items():
                    document[key] = document.get(key, 0) + amount
            elif operator == "$unset":
                for key in fields:
                    document.pop(key, None)
            elif operator == "$push":
                for key, value in fields.items():
                    document.setdefault(key, []).append(value)
            else:
                raise NotImplementedError(operator)


class FakeSession:
    """Records start/commit/abort/end calls"""

    def __init__(self, async_start: bool = False):
        self.async_start = async_start
        self.events: List[str] = []
        self.in_transaction = False
        self.ended = False

    def start_transaction(self):
        self.events.append("start_transaction")
        self.in_transaction = True
        if self.async_start:
            return self._started()
        return self

    async def _started(self):
        return self

    async def commit_transaction(self):
        self.events.append("commit_transaction")
        self.in_transaction = False

    async def abort_transaction(self):
        self.events.append("abort_transaction")
        self.in_transaction = False

    async def end_session(self):
        self.events.append("end_session")
        self.ended = True


class FakeClient:
    """Connection stand-in; only start_session is used by the repository"""

    def __init__(self, async_start: bool = False):
        self.async_start = async_start
        self.sessions: List[FakeSession] = []

    def start_session(self, **kwargs):
        session = FakeSession(async_start=self.async_start)
        self.sessions.append(session)
        return session


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio"""
    return "asyncio"


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def widget_model(collection) -> CollectionModel[Widget]:
    return CollectionModel(collection, Widget)


@pytest.fixture
def repository(widget_model, client) -> WidgetRepository:
    return WidgetRepository(widget_model, client)
