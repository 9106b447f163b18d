from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

# Local application imports
from bmi_tracker.application.bmi.background_saver import BackgroundResultSaver
from bmi_tracker.application.bmi.orchestrators.bmi_orchestrator import BMIOrchestrator
from bmi_tracker.domain.bmi.validation.input_validator import InputValidator
from bmi_tracker.graphql_api.context import GraphQLContext, create_context
from bmi_tracker.graphql_api.schema import create_schema
from bmi_tracker.infrastructure.config import (
    get_repository_backend,
    get_strict_validation,
)
from bmi_tracker.infrastructure.persistence.key_value_store_factory import (
    create_bmi_result_repository,
)

load_dotenv()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

# Versione letta da env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")


_bmi_repository = create_bmi_result_repository()
_result_saver = BackgroundResultSaver(_bmi_repository)
_bmi_orchestrator = BMIOrchestrator(
    validator=InputValidator(strict=get_strict_validation()),
)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle: log configuration, drain pending saves on shutdown."""
    logger.info(
        "lifespan.startup",
        extra={
            "backend": get_repository_backend(),
            "strict_validation": _bmi_orchestrator.validator.strict,
            "version": APP_VERSION,
        },
    )
    yield

    logger.info("lifespan.shutdown", extra={"pending_saves": _result_saver.pending})
    await _result_saver.drain()


app = FastAPI(
    title="BMI Tracker Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context() -> GraphQLContext:
    """Create GraphQL context with the application singletons."""
    return create_context(
        bmi_repository=_bmi_repository,
        bmi_orchestrator=_bmi_orchestrator,
        result_saver=_result_saver,
    )


schema = create_schema()

graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
