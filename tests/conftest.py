"""Global test configuration and fixtures."""

import pytest

from tests.factories import (
    BlogEntityFactory,
    OrganisationEntityFactory,
    ShopifyConnectionFactory,
    UpcomingPostFactory,
)


@pytest.fixture
def organisation_factory():
    return OrganisationEntityFactory


@pytest.fixture
def shopify_connection_factory():
    return ShopifyConnectionFactory


@pytest.fixture
def blog_factory():
    return BlogEntityFactory


@pytest.fixture
def upcoming_post_factory():
    return UpcomingPostFactory
