"""
Database schema, migrations, and seeding for the fitness subscription backend.

Runtime DB access lives in the API services. This package is for repo-level DB operations:
- Alembic migrations config and revisions
- Deterministic seed generators
- The activity-history access layer
"""
