"""BackgroundResultSaver - fire-and-forget persistence of BMI results."""

import asyncio
import logging
from typing import Set

from bmi_tracker.domain.bmi.core.exceptions.domain_errors import ResultStorageError
from bmi_tracker.domain.bmi.core.ports.repository import IBMIResultRepository
from bmi_tracker.domain.bmi.core.value_objects.bmi_result import BMIResult

logger = logging.getLogger(__name__)


class BackgroundResultSaver:
    """
    Issues saves without awaiting them.

    A new save may start before a previous one completes. There is no
    mutual exclusion and no cancellation: whichever save completes last
    determines the persisted record.

    Failed saves are logged and never raised to the caller.

    Example:
        >>> saver = BackgroundResultSaver(repository)
        >>> saver.schedule(result)   # returns immediately
        >>> await saver.drain()      # wait for in-flight saves (shutdown/tests)
    """

    def __init__(self, repository: IBMIResultRepository) -> None:
        self._repository = repository
        # Strong references keep running tasks from being garbage collected
        self._tasks: Set["asyncio.Task[None]"] = set()

    @property
    def pending(self) -> int:
        """Number of saves still in flight."""
        return len(self._tasks)

    def schedule(self, result: BMIResult) -> "asyncio.Task[None]":
        """
        Start saving result in the background.

        Must be called from a running event loop.

        Args:
            result: Result to persist

        Returns:
            The save task (callers are not expected to await it)
        """
        task = asyncio.create_task(self._save(result))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for all in-flight saves to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _save(self, result: BMIResult) -> None:
        try:
            await self._repository.save(result)
        except ResultStorageError as e:
            logger.error(
                "Failed to save BMI",
                extra={"value": result.value, "error": str(e)},
                exc_info=True,
            )
        except Exception as e:
            # Adapter bug or unexpected backend error: still non-fatal
            logger.error(
                "Unexpected error while saving BMI",
                extra={"value": result.value, "error": str(e)},
                exc_info=True,
            )
