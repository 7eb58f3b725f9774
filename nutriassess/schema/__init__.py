"""GraphQL API for the assessment calculator."""
