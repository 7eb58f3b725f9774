"""Assessment GraphQL resolvers."""

from nutriassess.schema.resolvers.assessment_queries import AssessmentQueries

__all__ = ["AssessmentQueries"]
