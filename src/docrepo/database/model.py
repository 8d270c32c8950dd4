"""
Collection Model Handle

Binds one MongoDB collection to one document class. The repository issues
its queries through the bound collection and uses this handle to move
between pydantic documents and raw store records.
"""

from typing import Any, Dict, Generic, Mapping, Type, TypeVar, Union

from bson import ObjectId
from pydantic import BaseModel
from pymongo.asynchronous.collection import AsyncCollection

from docrepo.schema.base import AbstractDocument

TDocument = TypeVar("TDocument", bound=AbstractDocument)

ID_FIELD = "_id"

DocumentInput = Union[Mapping[str, Any], BaseModel]


class CollectionModel(Generic[TDocument]):
    """Type-safe accessor for a single collection"""

    def __init__(self, collection: AsyncCollection, document_class: Type[TDocument]):
        self.collection = collection
        self.document_class = document_class

    @property
    def name(self) -> str:
        return self.collection.name

    def build(self, data: Mapping[str, Any]) -> TDocument:
        """Validate data into a new document; used before a write"""
        return self.document_class.model_validate(dict(data))

    def snapshot(self, record: Mapping[str, Any]) -> TDocument:
        """
        Wrap a record read back from the store without re-validating it.

        The store already holds the record, so a partial one (after $unset,
        or an upsert seeded only from the filter) is returned as-is with
        only the fields it has set.
        """
        return self.document_class.model_construct(**dict(record))

    def to_record(self, document: TDocument) -> Dict[str, Any]:
        """Dump a document into the store-native dict form"""
        return document.model_dump(by_alias=True)

    def fields_of(self, document: DocumentInput) -> Dict[str, Any]:
        """
        Return the domain fields of a document, identity excluded.

        Both "_id" and "id" (the identity field's Python name) are dropped.
        cast_filter does not alias "id", so filters must use "_id".
        """
        if isinstance(document, BaseModel):
            fields = document.model_dump(by_alias=True, exclude_unset=True)
        else:
            fields = dict(document)
        fields.pop(ID_FIELD, None)
        fields.pop("id", None)
        return fields

    def to_update(self, update: DocumentInput) -> Dict[str, Any]:
        """
        Normalise an update into an operator document.

        Operator keys ($set, $inc, ...) pass through. Plain field keys are
        merged into $set, so {"name": "a"} becomes {"$set": {"name": "a"}}.
        """
        if isinstance(update, BaseModel):
            return {"$set": self.fields_of(update)}

        operators: Dict[str, Any] = {}
        plain_fields: Dict[str, Any] = {}
        for key, value in update.items():
            if key.startswith("$"):
                operators[key] = value
            else:
                plain_fields[key] = value

        if plain_fields:
            merged_set = dict(operators.get("$set", {}))
            merged_set.update(plain_fields)
            operators["$set"] = merged_set
        return operators

    def cast_filter(self, filter_query: Mapping[str, Any]) -> Dict[str, Any]:
        """Cast a top-level string _id into an ObjectId"""
        query = dict(filter_query)
        identity = query.get(ID_FIELD)
        if isinstance(identity, str) and ObjectId.is_valid(identity):
            query[ID_FIELD] = ObjectId(identity)
        return query

    def __repr__(self) -> str:
        return f"CollectionModel({self.name!r}, {self.document_class.__name__})"
