"""GraphQL context factory for dependency injection.

Provides all required dependencies for GraphQL resolvers:
- Repository (last BMI result)
- Orchestrator (validation + calculation + classification)
- Background saver (fire-and-forget persistence)
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from bmi_tracker.application.bmi.background_saver import BackgroundResultSaver
from bmi_tracker.application.bmi.orchestrators.bmi_orchestrator import BMIOrchestrator
from bmi_tracker.domain.bmi.core.ports.repository import IBMIResultRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Resolvers access dependencies using `info.context.get("name")`.

    Attributes:
        bmi_repository: Repository for the last BMI result
        bmi_orchestrator: Pure BMI pipeline
        result_saver: Fire-and-forget saver bound to bmi_repository
        request: FastAPI request object
    """

    def __init__(
        self,
        bmi_repository: IBMIResultRepository,
        bmi_orchestrator: BMIOrchestrator,
        result_saver: BackgroundResultSaver,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.bmi_repository = bmi_repository
        self.bmi_orchestrator = bmi_orchestrator
        self.result_saver = result_saver
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (None if not found).

        Example:
            >>> repository = info.context.get("bmi_repository")
        """
        return getattr(self, key, None)


def create_context(
    bmi_repository: IBMIResultRepository,
    bmi_orchestrator: BMIOrchestrator,
    result_saver: BackgroundResultSaver,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    return GraphQLContext(
        bmi_repository=bmi_repository,
        bmi_orchestrator=bmi_orchestrator,
        result_saver=result_saver,
        request=request,
    )
