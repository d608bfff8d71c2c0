"""
Search analytics.

Responsibilities:
- Keep an in-memory log of recipe searches and substitution lookups.
- Aggregate it into usage statistics for the /analytics endpoint.
"""
