"""FastAPI application exposing the assessment calculator over GraphQL."""

from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Local application imports
from nutriassess.application.assessment.queries.compute_assessment import (
    ComputeAssessmentQueryHandler,
)
from nutriassess.infrastructure.config import get_app_version, get_log_level
from nutriassess.schema.context import GraphQLContext, create_context
from nutriassess.schema.schema import create_schema

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

APP_VERSION = get_app_version()

schema = create_schema()

# Stateless: one handler serves every request
_assessment_handler = ComputeAssessmentQueryHandler()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logger = _logging.getLogger("startup")
    logger.info("lifespan.startup", extra={"version": APP_VERSION, "log_level": _LOG_LEVEL})
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="Nutrition Assessment Service",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context(request: Request) -> GraphQLContext:
    """Create GraphQL context for one request."""
    return create_context(assessment_handler=_assessment_handler, request=request)


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
