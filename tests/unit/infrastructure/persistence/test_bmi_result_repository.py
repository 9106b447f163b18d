"""Unit tests for KeyValueBMIResultRepository."""

import json

import pytest

from bmi_tracker.domain.bmi.core.exceptions.domain_errors import ResultStorageError
from bmi_tracker.domain.bmi.core.value_objects import BMICategory, BMIResult
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


class TestKeyValueBMIResultRepository:
    @pytest.mark.asyncio
    async def test_load_when_nothing_saved(self, repository: KeyValueBMIResultRepository) -> None:
        assert await repository.load() is None

    @pytest.mark.asyncio
    async def test_save_writes_flat_record_under_last_bmi(
        self, repository: KeyValueBMIResultRepository, store: InMemoryKeyValueStore
    ) -> None:
        await repository.save(BMIResult.from_value(22.86))

        assert repository.key == "lastBMI"
        assert json.loads(await store.get("lastBMI")) == {
            "value": 22.86,
            "category": "Normal weight",
        }

    @pytest.mark.asyncio
    async def test_save_then_load(self, repository: KeyValueBMIResultRepository) -> None:
        saved = BMIResult.from_value(17.58)

        await repository.save(saved)

        assert await repository.load() == saved

    @pytest.mark.asyncio
    async def test_latest_save_overwrites(self, repository: KeyValueBMIResultRepository) -> None:
        await repository.save(BMIResult.from_value(22.86))
        await repository.save(BMIResult.from_value(31.14))

        loaded = await repository.load()

        assert loaded is not None
        assert loaded.category == BMICategory.OBESE

    @pytest.mark.asyncio
    async def test_custom_key(self, store: InMemoryKeyValueStore) -> None:
        repository = KeyValueBMIResultRepository(store, key="profile:42:lastBMI")

        await repository.save(BMIResult.from_value(22.86))

        assert await store.get("lastBMI") is None
        assert await store.get("profile:42:lastBMI") is not None

    @pytest.mark.asyncio
    async def test_load_record_written_by_other_client(
        self, repository: KeyValueBMIResultRepository, store: InMemoryKeyValueStore
    ) -> None:
        """Stale category labels are replaced by the derived one."""
        await store.set("lastBMI", '{"value": 24.95, "category": "Obese"}')

        loaded = await repository.load()

        assert loaded == BMIResult(value=24.95, category=BMICategory.NORMAL_WEIGHT)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            "not json",
            "[22.86]",
            '"22.86"',
            '{"category": "Obese"}',
            '{"value": "abc"}',
            '{"value": null}',
            '{"value": -1}',
        ],
    )
    async def test_corrupt_record_raises(
        self,
        repository: KeyValueBMIResultRepository,
        store: InMemoryKeyValueStore,
        payload: str,
    ) -> None:
        await store.set("lastBMI", payload)

        with pytest.raises(ResultStorageError, match="lastBMI"):
            await repository.load()


class TestFileBackedRepository:
    @pytest.mark.asyncio
    async def test_save_after_corrupt_file_is_readable(self, tmp_path) -> None:
        from bmi_tracker.infrastructure.persistence.file.key_value_store import (
            JsonFileKeyValueStore,
        )

        path = tmp_path / "bmi.json"
        path.write_text("garbage", encoding="utf-8")
        repository = KeyValueBMIResultRepository(JsonFileKeyValueStore(path))

        with pytest.raises(ResultStorageError):
            await repository.load()

        await repository.save(BMIResult.from_value(22.86))

        assert await repository.load() == BMIResult.from_value(22.86)
