"""Helpers for the 12-byte ObjectId identifiers used by stored documents."""

from typing import Annotated, Any

from bson import ObjectId
from pydantic import PlainSerializer, PlainValidator, WithJsonSchema


def is_object_id(value: Any) -> bool:
    """Return True for an ObjectId or a string that parses as one."""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value)


def parse_object_id(value: Any) -> ObjectId:
    """
    Parse a stored identifier into an ObjectId.

    Args:
        value: An ObjectId or its 24 character hex representation

    Returns:
        The parsed ObjectId

    Raises:
        ValueError: If the value is not a valid identifier
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    raise ValueError(f"Invalid ObjectId: {value!r}")


def object_id_to_str(value: ObjectId) -> str:
    """Return the lowercase hex form of an ObjectId."""
    return str(value)


PyObjectId = Annotated[
    ObjectId,
    PlainValidator(parse_object_id),
    PlainSerializer(object_id_to_str, return_type=str),
    WithJsonSchema({"type": "string", "pattern": "^[0-9a-fA-F]{24}$"}),
]


def parse_object_id_ref(value: Any) -> ObjectId | str:
    """Accept an id reference, keeping a hex string exactly as it was stored."""
    if is_object_id(value):
        return value
    raise ValueError(f"Invalid ObjectId: {value!r}")


ObjectIdRef = Annotated[
    ObjectId | str,
    PlainValidator(parse_object_id_ref),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "pattern": "^[0-9a-fA-F]{24}$"}),
]
