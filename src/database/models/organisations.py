"""Organisation document and related enums."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from src.utils.object_ids import PyObjectId
from .base import Base


class ShopifyConnectionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    INACTIVE = "INACTIVE"
    ERROR = "ERROR"


class BillingPlanStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class ShopifyConnection(Base):
    """Credentials for the connected Shopify store."""

    api_key: str
    domain: str
    scopes: str | None = Field(
        None, description="The scopes approved (comma separated string)"
    )


class OrganisationEntity(Base):
    """An organisation as stored in the ``organisations`` collection."""

    id: PyObjectId = Field(..., alias="_id")
    org_type: None = None
    country: str | None = Field(None, description="Country of origin")
    locale: str | None = None
    contact_email: str | None = None
    plan: str | None = Field(None, description="Shopify plan")
    website: str | None = None
    topics: list[str] | None = None
    rating: float | None = None
    reviewed: bool | None = None
    review_surface: str | None = None

    shopify_connection: ShopifyConnection | None = None
    shopify_connection_status: ShopifyConnectionStatus | None = None

    billing_plan_status: BillingPlanStatus | None = None
    billing_subscription_id: str | None = None
    billing_plan_handle: str | None = None
    billing_updated_at: datetime | None = None

    created_at: datetime | None = None
    settings_last_synced: datetime | None = None
