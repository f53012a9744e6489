"""Stored document models."""

from .base import Base
from .blogs import (
    BlogEntity,
    BlogInput,
    BlogType,
    CompletedPost,
    EnabledFormats,
    EnabledProducts,
    Image,
    ImageAspectRatio,
    ImageSource,
    Product,
    PublishDays,
    UpcomingPost,
)
from .organisations import (
    BillingPlanStatus,
    OrganisationEntity,
    ShopifyConnection,
    ShopifyConnectionStatus,
)

# Export all models and enums
__all__ = [
    # Base
    "Base",
    # Enums
    "BillingPlanStatus",
    "BlogType",
    "ImageAspectRatio",
    "ImageSource",
    "ShopifyConnectionStatus",
    # Models
    "BlogEntity",
    "BlogInput",
    "CompletedPost",
    "EnabledFormats",
    "EnabledProducts",
    "Image",
    "OrganisationEntity",
    "Product",
    "PublishDays",
    "ShopifyConnection",
    "UpcomingPost",
]
