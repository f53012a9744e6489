"""Blog API schemas (combined models/requests)."""

from src.api.core.messages import APIResponse
from .models import BlogModel
from .requests import BlogInputRequest, BlogPayloadRequest

BlogResponse = APIResponse[BlogModel]
BlogListResponse = APIResponse[list[BlogModel]]

__all__ = [
    "BlogInputRequest",
    "BlogModel",
    "BlogPayloadRequest",
    "BlogResponse",
    "BlogListResponse",
]
