"""Exceptions raised by the schema and conversion layer."""

from pydantic import ValidationError

from ..messages import MessageCode, get_default_message
from src.utils.logger import get_logger

logger = get_logger(__name__)


class AutoblogException(Exception):
    """Base exception for the blog API with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        details: dict | None = None,
    ):
        self.message_code = message_code
        self.message: str = get_default_message(message_code)
        self.details = details or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        return {
            "message_code": self.message_code,
            "message": self.message,
            "details": self.details,
        }


class ConversionValidationError(AutoblogException):
    """A stored entity or its converted model failed schema validation.

    Nothing is returned alongside this error: the conversion either produces
    a fully validated model or raises.
    """

    def __init__(self, entity_kind: str, error: ValidationError):
        self.entity_kind = entity_kind
        self.errors = _serializable_errors(error)
        super().__init__(
            MessageCode.ENTITY_CONVERSION_FAILED,
            details={
                "entity": entity_kind,
                "validation_errors": self.errors,
            },
        )

    @classmethod
    def from_validation_error(
        cls, entity_kind: str, error: ValidationError
    ) -> "ConversionValidationError":
        logger.warning(
            "entity_conversion_failed",
            entity=entity_kind,
            error_count=error.error_count(),
        )
        return cls(entity_kind, error)


def _serializable_errors(error: ValidationError) -> list[dict]:
    # Raw inputs can hold credentials or datetimes, keep location and message only
    return [
        {
            "loc": [str(part) for part in item["loc"]],
            "msg": item["msg"],
            "type": item["type"],
        }
        for item in error.errors()
    ]
