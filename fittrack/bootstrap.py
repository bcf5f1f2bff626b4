"""Session wiring.

Builds one tracker session from settings: the key-value store, the
repositories on top of it, a validator and the four application
components. Everything is constructed here and passed in explicitly.

Usage:
    from fittrack.bootstrap import create_session

    session = create_session()
    outcome = session.bmi_calculator.calculate_and_record("70", "kg", "170", "cm")
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from fittrack.application import (
    BMICalculator,
    CalorieEstimator,
    ProgressTracker,
    WorkoutPlanner,
)
from fittrack.domain.shared.ports import KeyValueStore
from fittrack.domain.shared.validation import Validator
from fittrack.infrastructure.config import Settings, load_settings
from fittrack.infrastructure.logging_setup import configure_logging
from fittrack.infrastructure.persistence import (
    BMIHistoryRepository,
    CalorieHistoryRepository,
    WeightHistoryRepository,
    WorkoutPlanRepository,
    create_key_value_store,
)

logger = structlog.get_logger(__name__)


@dataclass
class Session:
    """Wired components of one tracker session."""

    settings: Settings
    store: KeyValueStore
    validator: Validator
    bmi_calculator: BMICalculator
    calorie_estimator: CalorieEstimator
    workout_planner: WorkoutPlanner
    progress_tracker: ProgressTracker


def create_session(
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
) -> Session:
    """Create a session.

    Args:
        settings: Runtime settings, read from the environment if None
        store: Store to use instead of the one selected by settings

    Returns:
        Session: Ready-to-use components sharing one store
    """
    if settings is None:
        settings = load_settings(".env")
    configure_logging(settings)

    if store is None:
        store = create_key_value_store(settings)
    if not store.is_available():
        logger.warning("Storage not available, data will not persist")

    validator = Validator()
    workout_planner = WorkoutPlanner(WorkoutPlanRepository(store), validator)

    session = Session(
        settings=settings,
        store=store,
        validator=validator,
        bmi_calculator=BMICalculator(validator, BMIHistoryRepository(store)),
        calorie_estimator=CalorieEstimator(validator, CalorieHistoryRepository(store)),
        workout_planner=workout_planner,
        progress_tracker=ProgressTracker(
            workout_planner.get_weekly_plan, WeightHistoryRepository(store), validator
        ),
    )
    logger.info("Session created", storage_backend=settings.storage_backend)
    return session
