"""Blog document, its settings and post queues."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from src.utils.object_ids import ObjectIdRef, PyObjectId
from .base import Base
from .organisations import OrganisationEntity


class BlogType(str, Enum):
    """Which prompt is used to write posts."""

    RECIPE = "RECIPE"
    TOPIC = "TOPIC"
    PRODUCT = "PRODUCT"


class ImageAspectRatio(str, Enum):
    ANY = "ANY"
    SQUARE = "SQUARE"
    LANDSCAPE = "LANDSCAPE"
    PORTRAIT = "PORTRAIT"


class ImageSource(str, Enum):
    ANY = "ANY"
    PRODUCTS = "PRODUCTS"
    SEARCH = "SEARCH"


class Product(Base):
    id: str | None = None
    image: str | None = None
    title: str | None = None
    url: str | None = None


class Image(Base):
    url: str | None = Field(None, description="Sourced image URL")
    alt: str | None = Field(None, description="Sourced image alt text")
    credit: str | None = Field(None, description="Sourced image credit/attribution")


class UpcomingPost(Base):
    """A queued post prompt."""

    title: str | None = Field(
        None, description="Title of post, used to generate the content"
    )
    image: Image | None = None
    products: list[Product] | None = Field(
        None, description="Products to include in the post"
    )


class CompletedPost(Base):
    title: str | None = None
    id: str | None = Field(None, description="GQL ID for the published article")


class EnabledFormats(Base):
    all_enabled: bool | None = None
    enabled: list[str] | None = Field(None, description="Post formats e.g. listicle")


class EnabledProducts(Base):
    all_enabled: bool | None = None
    enabled: list[Product] | None = Field(None, description="Approved products")


class PublishDays(Base):
    monday: bool | None = None
    tuesday: bool | None = None
    wednesday: bool | None = None
    thursday: bool | None = None
    friday: bool | None = None
    saturday: bool | None = None
    sunday: bool | None = None


class BlogInput(Base):
    """Blog settings and post queues shared by every blog shape."""

    disabled: bool | None = None

    # Settings
    blog_type: BlogType | None = None
    blog_topic: str | None = Field(
        None, description="Supplied prompt/topic for writing TOPIC posts"
    )
    enabled_formats: EnabledFormats | None = None
    enabled_products: EnabledProducts | None = None
    keywords: list[str] | None = Field(
        None, description="Keywords to mention in blog posts"
    )
    author_name: str | None = Field(None, description="Name of author when publishing")
    blog_id: str | None = Field(None, description="ID of the blog we publish to")
    language: str | None = None
    publish_posts: bool | None = Field(
        None, description="Published as draft if false, active if true"
    )
    publish_days: PublishDays | None = None
    title_custom_prompt: str | None = None
    title_word_limit: float | None = None
    body_custom_prompt: str | None = None
    body_word_count: float | None = Field(
        None, description="Preferred word count for articles"
    )
    image_keywords: str | None = Field(
        None, description="Image keywords to override image searching"
    )
    image_aspect_ratio: ImageAspectRatio | None = None
    image_source: ImageSource | None = None
    image_width: float | None = None

    upcoming_posts: list[UpcomingPost] | None = None
    completed_posts: list[CompletedPost] | None = None


class BlogEntity(BlogInput):
    """A blog as stored in the ``blogs`` collection.

    ``org`` holds either the owning organisation's id or, once expanded,
    the embedded organisation document.
    """

    id: PyObjectId = Field(..., alias="_id")
    org: ObjectIdRef | OrganisationEntity = Field(
        ..., description="The owner of this blog"
    )

    # Timestamps
    created_at: datetime | None = None
    last_post_published: datetime | None = None
    last_updated: datetime | None = None
