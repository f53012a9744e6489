"""Blog domain requests."""

from src.database.models import BlogInput


class BlogInputRequest(BlogInput):
    """Settings supplied when creating or updating a blog."""


class BlogPayloadRequest(BlogInput):
    """Blog settings addressed to an existing blog."""

    id: str | None = None
