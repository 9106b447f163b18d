"""Unit tests for BackgroundResultSaver."""

import asyncio
import logging
from typing import Dict, List, Optional

import pytest

from bmi_tracker.application.bmi.background_saver import BackgroundResultSaver
from bmi_tracker.domain.bmi.core.exceptions.domain_errors import ResultStorageError
from bmi_tracker.domain.bmi.core.ports.repository import IBMIResultRepository
from bmi_tracker.domain.bmi.core.value_objects import BMIResult


class GatedRepository(IBMIResultRepository):
    """Repository whose saves block until their gate is opened."""

    def __init__(self) -> None:
        self.gates: Dict[float, asyncio.Event] = {}
        self.stored: Optional[BMIResult] = None
        self.completed: List[float] = []

    def gate(self, value: float) -> asyncio.Event:
        return self.gates.setdefault(value, asyncio.Event())

    async def save(self, result: BMIResult) -> None:
        await self.gate(result.value).wait()
        self.stored = result
        self.completed.append(result.value)

    async def load(self) -> Optional[BMIResult]:
        return self.stored


class FailingRepository(IBMIResultRepository):
    def __init__(self, error: Exception) -> None:
        self._error = error

    async def save(self, result: BMIResult) -> None:
        raise self._error

    async def load(self) -> Optional[BMIResult]:
        return None


class TestBackgroundResultSaver:
    @pytest.mark.asyncio
    async def test_schedule_returns_before_save_completes(self) -> None:
        repository = GatedRepository()
        saver = BackgroundResultSaver(repository)

        saver.schedule(BMIResult.from_value(22.86))
        await asyncio.sleep(0)

        assert saver.pending == 1
        assert repository.stored is None

        repository.gate(22.86).set()
        await saver.drain()

        assert saver.pending == 0
        assert repository.stored == BMIResult.from_value(22.86)

    @pytest.mark.asyncio
    async def test_last_completed_save_wins(self) -> None:
        """Saves are not serialized: completion order decides the record."""
        repository = GatedRepository()
        saver = BackgroundResultSaver(repository)
        first = BMIResult.from_value(22.86)
        second = BMIResult.from_value(31.14)

        saver.schedule(first)
        second_task = saver.schedule(second)
        await asyncio.sleep(0)
        assert saver.pending == 2

        # The later request completes first, the earlier one overwrites it
        repository.gate(31.14).set()
        await second_task
        assert await repository.load() == second
        repository.gate(22.86).set()
        await saver.drain()

        assert repository.completed == [31.14, 22.86]
        assert await repository.load() == first

    @pytest.mark.asyncio
    async def test_storage_error_is_logged_not_raised(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        saver = BackgroundResultSaver(FailingRepository(ResultStorageError("disk full")))

        with caplog.at_level(logging.ERROR):
            task = saver.schedule(BMIResult.from_value(22.86))
            await saver.drain()

        assert task.exception() is None
        assert "Failed to save BMI" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_error_is_logged_not_raised(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        saver = BackgroundResultSaver(FailingRepository(RuntimeError("boom")))

        with caplog.at_level(logging.ERROR):
            task = saver.schedule(BMIResult.from_value(22.86))
            await saver.drain()

        assert task.exception() is None
        assert "Unexpected error while saving BMI" in caplog.text

    @pytest.mark.asyncio
    async def test_drain_without_pending_saves(self) -> None:
        saver = BackgroundResultSaver(GatedRepository())

        await saver.drain()

        assert saver.pending == 0
