"""Blog domain models."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import Field, ValidationError

from src.api.core.exceptions.base import ConversionValidationError
from src.api.organisation.models import OrganisationModel
from src.database.models import BlogEntity, BlogInput
from src.utils.object_ids import is_object_id, object_id_to_str
from src.utils.timestamps import materialize_timestamp


class BlogModel(BlogInput):
    """Blog as returned to clients."""

    id: str
    org: str | OrganisationModel = Field(
        ..., description="Owner id, or the owner itself when it was expanded"
    )

    created_at: datetime | None = None
    last_post_published: datetime | None = None
    last_updated: datetime | None = None

    @classmethod
    def convert_from_entity(
        cls,
        entity: BlogEntity | Mapping[str, Any],
        include_credentials: bool = False,
    ) -> "BlogModel":
        """
        Build the client-facing model from a stored blog.

        An expanded owner is converted with the same ``include_credentials``
        flag; an unexpanded one is returned as its id string.

        Raises:
            ConversionValidationError: If the entity or the result is malformed
        """
        entity = _as_entity(entity)

        if is_object_id(entity.org):
            org: str | OrganisationModel = str(entity.org)
        else:
            org = OrganisationModel.convert_from_entity(
                entity.org, include_credentials=include_credentials
            )

        # Settings and post queues are passed through untouched
        obj: dict[str, Any] = {
            name: getattr(entity, name) for name in BlogInput.model_fields
        }
        obj.update(
            id=object_id_to_str(entity.id),
            org=org,
            created_at=materialize_timestamp(entity.created_at),
            last_post_published=materialize_timestamp(entity.last_post_published),
            last_updated=materialize_timestamp(entity.last_updated),
        )

        try:
            return cls.model_validate(obj)
        except ValidationError as e:
            raise ConversionValidationError.from_validation_error("blog", e) from e


def _as_entity(entity: BlogEntity | Mapping[str, Any]) -> BlogEntity:
    if isinstance(entity, BlogEntity):
        return entity
    try:
        return BlogEntity.model_validate(entity)
    except ValidationError as e:
        raise ConversionValidationError.from_validation_error("blog", e) from e
