"""Developer DTO — camelCase wire format and entity mapping.

Invariants:
    - Input accepts camelCase and snake_case keys
    - Output uses camelCase and omits null id/status
    - Name, email and specialty are required
"""

import pytest
from pydantic import ValidationError

from devregistry.core.domain_types import DeveloperStatus
from devregistry.schemas.developer import DeveloperDto, ErrorResponse
from tests.factories import developer_payload, make_developer


def test_parses_camel_case_payload():
    dto = DeveloperDto.model_validate(developer_payload())
    assert dto.first_name == "John"
    assert dto.last_name == "Doe"
    assert dto.id is None
    assert dto.status is None


def test_accepts_snake_case_names():
    dto = DeveloperDto(
        first_name="Ada", last_name="Lovelace",
        email="ada@example.com", specialty="Math",
    )
    assert dto.first_name == "Ada"


def test_parses_status_string():
    dto = DeveloperDto.model_validate(developer_payload(status="DELETED"))
    assert dto.status is DeveloperStatus.DELETED


def test_rejects_unknown_status():
    with pytest.raises(ValidationError):
        DeveloperDto.model_validate(developer_payload(status="ARCHIVED"))


@pytest.mark.parametrize("missing", ["firstName", "lastName", "email", "specialty"])
def test_required_fields(missing):
    payload = developer_payload()
    del payload[missing]
    with pytest.raises(ValidationError):
        DeveloperDto.model_validate(payload)


def test_dump_omits_null_id_and_status():
    dto = DeveloperDto.model_validate(developer_payload())
    dumped = dto.model_dump(mode="json", by_alias=True, exclude_none=True)
    assert dumped == developer_payload()


def test_from_entity_serializes_camel_case():
    developer = make_developer(id=5, status=DeveloperStatus.ACTIVE)
    dumped = DeveloperDto.from_entity(developer).model_dump(
        mode="json", by_alias=True, exclude_none=True,
    )
    assert dumped == {
        "id": 5,
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "specialty": "Java",
        "status": "ACTIVE",
    }


def test_to_entity_copies_every_field():
    dto = DeveloperDto.model_validate(
        developer_payload(id=3, status="DELETED", specialty="Go"),
    )
    entity = dto.to_entity()
    assert entity.id == 3
    assert entity.first_name == "John"
    assert entity.email == "john.doe@example.com"
    assert entity.specialty == "Go"
    assert entity.status is DeveloperStatus.DELETED


def test_error_response_uses_error_code_alias():
    body = ErrorResponse(message="Developer not found", error_code="DEVELOPER_NOT_FOUND")
    assert body.model_dump(by_alias=True) == {
        "message": "Developer not found",
        "errorCode": "DEVELOPER_NOT_FOUND",
    }
