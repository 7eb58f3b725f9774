"""GraphQL context factory for dependency injection."""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from nutriassess.application.assessment.queries.compute_assessment import (
    ComputeAssessmentQueryHandler,
)


class GraphQLContext(BaseContext):
    """GraphQL context with the assessment dependencies.

    Resolvers access dependencies using `info.context.get("name")`.

    Attributes:
        assessment_handler: Handler for compute assessment queries
        request: FastAPI request object
        request_id: Correlation id from the X-Request-ID header, if sent
    """

    def __init__(
        self,
        assessment_handler: ComputeAssessmentQueryHandler,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.assessment_handler = assessment_handler
        self.request = request
        self.request_id: Optional[str] = (
            request.headers.get("x-request-id") if request is not None else None
        )

    def get(self, key: str) -> Any:
        """Get dependency by name, None if not found."""
        return getattr(self, key, None)


def create_context(
    assessment_handler: ComputeAssessmentQueryHandler,
    request: Optional[Request] = None,
) -> GraphQLContext:
    return GraphQLContext(assessment_handler=assessment_handler, request=request)
