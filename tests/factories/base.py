"""Base factory for stored documents."""

from typing import Any, Generic, TypeVar

import factory
from bson import ObjectId


T = TypeVar("T")


class DocumentFactory(factory.Factory, Generic[T]):
    """Base factory for pydantic document models."""

    class Meta:
        abstract = True

    @classmethod
    def _create(cls, model_class: type[T], *args: Any, **kwargs: Any) -> T:
        return model_class(**kwargs)

    @classmethod
    def as_document(cls, **kwargs: Any) -> dict[str, Any]:
        """Build an instance and dump it the way it sits in the collection."""
        return cls.build(**kwargs).model_dump(by_alias=True)


class ObjectIdFactory(factory.LazyFunction):
    """Factory for generating ObjectIds."""

    def __init__(self) -> None:
        super().__init__(ObjectId)
