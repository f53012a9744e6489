"""Organisation API schemas."""

from src.api.core.messages import APIResponse
from .models import OrganisationModel

OrganisationResponse = APIResponse[OrganisationModel]

__all__ = ["OrganisationModel", "OrganisationResponse"]
