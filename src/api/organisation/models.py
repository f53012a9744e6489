"""Organisation domain models."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import Field, ValidationError

from src.api.core.exceptions.base import ConversionValidationError
from src.database.models import (
    BillingPlanStatus,
    OrganisationEntity,
    ShopifyConnection,
    ShopifyConnectionStatus,
)
from src.database.models.base import Base
from src.utils.logger import get_logger
from src.utils.object_ids import object_id_to_str
from src.utils.timestamps import materialize_timestamp

logger = get_logger(__name__)


class OrganisationModel(Base):
    """Organisation as returned to clients."""

    id: str
    org_type: None = None
    country: str | None = None
    locale: str | None = None
    contact_email: str | None = None
    plan: str | None = None
    website: str | None = None
    topics: list[str] | None = None
    rating: float | None = None
    reviewed: bool | None = None
    review_surface: str | None = None

    shopify_connection: ShopifyConnection | None = Field(
        None, description="Only populated when credentials are requested"
    )
    shopify_connection_status: ShopifyConnectionStatus | None = None
    shopify_site: str | None = Field(
        None, description="Domain of the connected store"
    )

    billing_plan_status: BillingPlanStatus | None = None
    billing_subscription_id: str | None = None
    billing_plan_handle: str | None = None
    billing_updated_at: datetime | None = None

    created_at: datetime | None = None
    settings_last_synced: datetime | None = None

    @classmethod
    def convert_from_entity(
        cls,
        entity: OrganisationEntity | Mapping[str, Any],
        include_credentials: bool = False,
    ) -> "OrganisationModel":
        """
        Build the client-facing model from a stored organisation.

        Args:
            entity: The stored organisation, or the raw document
            include_credentials: Expose the Shopify credential bundle

        Returns:
            The validated organisation model

        Raises:
            ConversionValidationError: If the entity or the result is malformed
        """
        entity = _as_entity(entity)
        connection = entity.shopify_connection

        if include_credentials:
            logger.info(
                "organisation_credentials_included",
                organisation_id=object_id_to_str(entity.id),
                has_connection=connection is not None,
            )

        obj = {
            "id": object_id_to_str(entity.id),
            "org_type": None,
            "country": entity.country,
            "locale": entity.locale,
            "contact_email": entity.contact_email,
            "plan": entity.plan,
            "website": entity.website,
            "topics": entity.topics,
            "rating": entity.rating,
            "reviewed": entity.reviewed,
            "review_surface": entity.review_surface,
            "created_at": materialize_timestamp(entity.created_at, default_now=True),
            "settings_last_synced": materialize_timestamp(entity.settings_last_synced),
            "shopify_connection": connection if include_credentials else None,
            "shopify_connection_status": entity.shopify_connection_status
            or ShopifyConnectionStatus.INACTIVE,
            # The domain is not treated as a secret
            "shopify_site": connection.domain if connection else None,
            "billing_plan_status": entity.billing_plan_status
            or BillingPlanStatus.INACTIVE,
            "billing_subscription_id": entity.billing_subscription_id,
            "billing_plan_handle": entity.billing_plan_handle,
            "billing_updated_at": materialize_timestamp(entity.billing_updated_at),
        }

        try:
            return cls.model_validate(obj)
        except ValidationError as e:
            raise ConversionValidationError.from_validation_error("organisation", e) from e


def _as_entity(entity: OrganisationEntity | Mapping[str, Any]) -> OrganisationEntity:
    if isinstance(entity, OrganisationEntity):
        return entity
    try:
        return OrganisationEntity.model_validate(entity)
    except ValidationError as e:
        raise ConversionValidationError.from_validation_error("organisation", e) from e
