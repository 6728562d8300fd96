"""Test factories — developer records with sensible defaults."""

from devregistry.core.domain_types import DeveloperStatus
from devregistry.models.developer import Developer


def make_developer(
    first_name: str = "John",
    last_name: str = "Doe",
    email: str = "john.doe@example.com",
    specialty: str = "Java",
    status: DeveloperStatus | None = DeveloperStatus.ACTIVE,
    id: int | None = None,
) -> Developer:
    return Developer(
        id=id, first_name=first_name, last_name=last_name,
        email=email, specialty=specialty, status=status,
    )


def john_doe(**overrides) -> Developer:
    return make_developer(**overrides)


def mike_smith(**overrides) -> Developer:
    fields = dict(
        first_name="Mike", last_name="Smith",
        email="mike.smith@example.com", specialty="Java",
    )
    fields.update(overrides)
    return make_developer(**fields)


def frank_jones(**overrides) -> Developer:
    fields = dict(
        first_name="Frank", last_name="Jones",
        email="frank.jones@example.com", specialty="Java",
        status=DeveloperStatus.DELETED,
    )
    fields.update(overrides)
    return make_developer(**fields)


def developer_payload(**overrides) -> dict:
    """Wire-format body for POST/PUT requests."""
    payload = {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "specialty": "Java",
    }
    payload.update(overrides)
    return payload
