"""Fixtures for repository tests."""

import uuid

import pytest
from faker import Faker

from techhub.models.framework import Framework, FrameworkInput
from techhub.repositories.framework_repository import FrameworkRepository, UniquenessPolicy

fake = Faker()


@pytest.fixture
def framework_repository() -> FrameworkRepository:
    """A fresh store using the default policy (unique names). Ids start at 1."""
    return FrameworkRepository()


@pytest.fixture
def pair_repository() -> FrameworkRepository:
    """A fresh store where the (name, version) pair is the uniqueness key."""
    return FrameworkRepository(policy=UniquenessPolicy.NAME_VERSION)


@pytest.fixture
def sample_framework_input() -> FrameworkInput:
    return FrameworkInput(name="Playwright", current_version="1.45.0")


@pytest.fixture
def create_framework(framework_repository: FrameworkRepository):
    """
    Factory creating frameworks with generated, unique names.

    Usage:
        fw = create_framework(name="Cypress")
    """
    def _create(**overrides) -> Framework:
        data = {
            "name": f"{fake.word().title()} {uuid.uuid4().hex[:6]}",
            "current_version": fake.numerify("#.#.#"),
        }
        data.update(overrides)
        return framework_repository.create(FrameworkInput(**data))

    return _create


@pytest.fixture
def created_framework(create_framework, sample_framework_input: FrameworkInput) -> Framework:
    return create_framework(
        name=sample_framework_input.name,
        current_version=sample_framework_input.current_version,
    )


@pytest.fixture
def multiple_frameworks(create_framework) -> list[Framework]:
    return [create_framework() for _ in range(3)]
