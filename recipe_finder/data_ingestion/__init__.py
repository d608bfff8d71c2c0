"""
Catalog ingestion package.

Responsibilities:
- Read a tabular export of the hosted recipes table.
- Normalize rows into the canonical Recipe schema, dropping malformed ones.
- Persist the catalog as JSON for the recommendation engine.
"""
