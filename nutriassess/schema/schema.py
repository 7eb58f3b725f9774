"""GraphQL schema factory for the assessment service.

Usage:
    from nutriassess.schema.schema import create_schema
    schema = create_schema()
"""

import strawberry

from nutriassess.schema.resolvers.assessment_queries import AssessmentQueries


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Clinical nutrition assessment calculator")  # type: ignore[misc]
    def assessment(self) -> AssessmentQueries:
        return AssessmentQueries()


def create_schema() -> strawberry.Schema:
    """Create the Strawberry schema."""
    return strawberry.Schema(query=Query)
