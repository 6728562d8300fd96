"""Developer Schemas — Pydantic wire types for the developers API.

Invariants:
    - JSON keys are camelCase (firstName, lastName); snake_case accepted on input
    - firstName, lastName, email, specialty must be present; no further validation
    - status serializes as "ACTIVE"/"DELETED"; id and status omitted when null
    - Error body is exactly {"message", "errorCode"}

Design Decisions:
    - One DTO for requests and responses: POST omits id, PUT carries it
    - to_entity/from_entity keep ORM objects out of route signatures
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from devregistry.core.domain_types import DeveloperStatus
from devregistry.models.developer import Developer


class DeveloperDto(BaseModel):
    """Developer record as sent and received over HTTP."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )

    id: int | None = None
    first_name: str
    last_name: str
    email: str
    specialty: str
    status: DeveloperStatus | None = None

    @classmethod
    def from_entity(cls, developer: Developer) -> "DeveloperDto":
        return cls(
            id=developer.id,
            first_name=developer.first_name,
            last_name=developer.last_name,
            email=developer.email,
            specialty=developer.specialty,
            status=developer.status,
        )

    def to_entity(self) -> Developer:
        return Developer(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            specialty=self.specialty,
            status=self.status,
        )


class ErrorResponse(BaseModel):
    """Error envelope for every 4xx/5xx response."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    error_code: str = Field(examples=["DEVELOPER_NOT_FOUND"])
