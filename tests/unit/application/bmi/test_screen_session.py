"""Unit tests for BMIScreenSession and BMIScreenState."""

import pytest

from bmi_tracker.application.bmi.background_saver import BackgroundResultSaver
from bmi_tracker.application.bmi.commands import CalculateBMIHandler
from bmi_tracker.application.bmi.orchestrators import BMIOrchestrator
from bmi_tracker.application.bmi.queries import GetLastBMIQueryHandler
from bmi_tracker.application.bmi.screen_session import BMIScreenSession, BMIScreenState
from bmi_tracker.domain.bmi.core.value_objects import BMICategory, BMIResult, ValidationReason
from bmi_tracker.infrastructure.persistence.bmi_result_repository import (
    KeyValueBMIResultRepository,
)
from bmi_tracker.infrastructure.persistence.in_memory.key_value_store import (
    InMemoryKeyValueStore,
)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def repository(store: InMemoryKeyValueStore) -> KeyValueBMIResultRepository:
    return KeyValueBMIResultRepository(store)


@pytest.fixture
def saver(repository: KeyValueBMIResultRepository) -> BackgroundResultSaver:
    return BackgroundResultSaver(repository)


@pytest.fixture
def session(
    repository: KeyValueBMIResultRepository, saver: BackgroundResultSaver
) -> BMIScreenSession:
    return BMIScreenSession(
        calculate_handler=CalculateBMIHandler(BMIOrchestrator(), saver),
        last_bmi_handler=GetLastBMIQueryHandler(repository),
    )


class TestBMIScreenState:
    def test_initial_state_is_empty(self) -> None:
        state = BMIScreenState()

        assert state.weight_text == ""
        assert state.result is None
        assert state.last_saved is None
        assert state.error is None

    def test_result_clears_error(self) -> None:
        state = BMIScreenState().with_error(ValidationReason.EMPTY_FIELD)

        state = state.with_result(BMIResult.from_value(22.86))

        assert state.error is None

    def test_cleared_keeps_last_saved(self) -> None:
        saved = BMIResult.from_value(17.58)
        state = BMIScreenState(
            weight_text="70",
            height_text="175",
            result=BMIResult.from_value(22.86),
            last_saved=saved,
        )

        cleared = state.cleared()

        assert cleared == BMIScreenState(last_saved=saved)


class TestBMIScreenSession:
    @pytest.mark.asyncio
    async def test_start_without_saved_result(self, session: BMIScreenSession) -> None:
        state = await session.start()

        assert state.result is None
        assert state.last_saved is None

    @pytest.mark.asyncio
    async def test_start_shows_saved_result(
        self, session: BMIScreenSession, repository: KeyValueBMIResultRepository
    ) -> None:
        await repository.save(BMIResult.from_value(31.14))

        state = await session.start()

        assert state.result == BMIResult.from_value(31.14)
        assert state.last_saved == BMIResult.from_value(31.14)

    @pytest.mark.asyncio
    async def test_start_with_corrupt_record_shows_empty_state(
        self, session: BMIScreenSession, store: InMemoryKeyValueStore
    ) -> None:
        await store.set("lastBMI", "not json")

        state = await session.start()

        assert state.result is None

    @pytest.mark.asyncio
    async def test_submit_displays_and_persists(
        self,
        session: BMIScreenSession,
        saver: BackgroundResultSaver,
        repository: KeyValueBMIResultRepository,
    ) -> None:
        await session.start()

        state = await session.submit("70", "175")
        await saver.drain()

        assert state.result is not None
        assert state.result.summary() == "BMI: 22.86 - Normal weight"
        assert state.weight_text == "70"
        assert await repository.load() == state.result

    @pytest.mark.asyncio
    async def test_rejected_submit_keeps_previous_result(
        self,
        session: BMIScreenSession,
        saver: BackgroundResultSaver,
        repository: KeyValueBMIResultRepository,
    ) -> None:
        await session.start()
        await session.submit("90", "170")
        await saver.drain()

        state = await session.submit("", "170")

        assert state.error == ValidationReason.EMPTY_FIELD
        assert state.result is not None
        assert state.result.category == BMICategory.OBESE
        assert saver.pending == 0
        assert (await repository.load()).value == 31.14

    @pytest.mark.asyncio
    async def test_clear_does_not_touch_storage(
        self,
        session: BMIScreenSession,
        saver: BackgroundResultSaver,
        repository: KeyValueBMIResultRepository,
    ) -> None:
        await session.start()
        await session.submit("45", "160")
        await saver.drain()

        state = session.clear()

        assert state.result is None
        assert state.weight_text == ""
        assert state.height_text == ""
        assert (await repository.load()) == BMIResult.from_value(17.58)

    @pytest.mark.asyncio
    async def test_new_session_after_clear_shows_saved_result(
        self,
        session: BMIScreenSession,
        saver: BackgroundResultSaver,
        repository: KeyValueBMIResultRepository,
    ) -> None:
        await session.start()
        await session.submit("70", "175")
        await saver.drain()
        session.clear()

        restarted = BMIScreenSession(
            calculate_handler=CalculateBMIHandler(BMIOrchestrator(), saver),
            last_bmi_handler=GetLastBMIQueryHandler(repository),
        )
        state = await restarted.start()

        assert state.result == BMIResult.from_value(22.86)
