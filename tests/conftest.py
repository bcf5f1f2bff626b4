"""Shared test fixtures.

Every fixture builds fresh collaborators; nothing is shared between
tests.
"""

import pytest

from fittrack.domain.shared.validation import Validator
from fittrack.infrastructure.persistence import (
    BMIHistoryRepository,
    CalorieHistoryRepository,
    InMemoryKeyValueStore,
    WeightHistoryRepository,
    WorkoutPlanRepository,
)


class FailingKeyValueStore(InMemoryKeyValueStore):
    """Store whose writes always fail, like a full or disabled storage."""

    def save(self, key, value):
        return False

    def is_available(self):
        return False


@pytest.fixture
def validator() -> Validator:
    return Validator()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def failing_store() -> FailingKeyValueStore:
    return FailingKeyValueStore()


@pytest.fixture
def bmi_history(store) -> BMIHistoryRepository:
    return BMIHistoryRepository(store)


@pytest.fixture
def calorie_history(store) -> CalorieHistoryRepository:
    return CalorieHistoryRepository(store)


@pytest.fixture
def weight_history(store) -> WeightHistoryRepository:
    return WeightHistoryRepository(store)


@pytest.fixture
def plan_repository(store) -> WorkoutPlanRepository:
    return WorkoutPlanRepository(store)
