"""Tests for blog request payloads."""

import pytest
from pydantic import ValidationError

from src.api.blog.requests import BlogInputRequest, BlogPayloadRequest
from src.database.models import BlogType, ImageSource


def test_input_accepts_camel_case_payload():
    request = BlogInputRequest.model_validate(
        {
            "blogType": "RECIPE",
            "keywords": ["bread"],
            "publishDays": {"monday": True, "sunday": False},
            "imageSource": "PRODUCTS",
            "bodyWordCount": 1200,
        }
    )

    assert request.blog_type == BlogType.RECIPE
    assert request.keywords == ["bread"]
    assert request.publish_days.monday is True
    assert request.publish_days.tuesday is None
    assert request.image_source == ImageSource.PRODUCTS
    assert request.body_word_count == 1200


def test_input_everything_optional():
    request = BlogInputRequest()

    assert request.model_dump(exclude_none=True) == {}


def test_input_rejects_unknown_aspect_ratio():
    with pytest.raises(ValidationError):
        BlogInputRequest.model_validate({"imageAspectRatio": "WIDE"})


def test_payload_carries_optional_id():
    assert BlogPayloadRequest().id is None

    request = BlogPayloadRequest.model_validate(
        {"id": "65a1b2c3d4e5f60718293a4b", "language": "fr"}
    )

    assert request.id == "65a1b2c3d4e5f60718293a4b"
    assert request.language == "fr"
