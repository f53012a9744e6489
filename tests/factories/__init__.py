"""Test factories for stored documents."""

from .base import DocumentFactory, ObjectIdFactory
from .organisations import OrganisationEntityFactory, ShopifyConnectionFactory
from .blogs import (
    BlogEntityFactory,
    CompletedPostFactory,
    ImageFactory,
    ProductFactory,
    PublishDaysFactory,
    UpcomingPostFactory,
)

__all__ = [
    "DocumentFactory",
    "ObjectIdFactory",
    "OrganisationEntityFactory",
    "ShopifyConnectionFactory",
    "BlogEntityFactory",
    "CompletedPostFactory",
    "ImageFactory",
    "ProductFactory",
    "PublishDaysFactory",
    "UpcomingPostFactory",
]
