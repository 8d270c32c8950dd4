"""
Base Document Model for the Document Repository

This module defines the identity-carrying base class every stored
document derives from. Documents are pydantic models, so a value read
back from MongoDB is always a detached snapshot rather than a live handle.
"""

from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class AbstractDocument(BaseModel):
    """Base class for all MongoDB documents"""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    id: ObjectId = Field(..., alias="_id", description="Store-generated identity")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_object_id(cls, value: Any) -> Any:
        """Accept the 24-hex string form of an ObjectId"""
        if isinstance(value, str) and ObjectId.is_valid(value):
            return ObjectId(value)
        return value

    @field_serializer("id", when_used="json")
    def serialize_object_id(self, value: ObjectId) -> str:
        return str(value)
