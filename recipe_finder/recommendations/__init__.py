"""
Recipe recommendation engine.

Responsibilities:
- Score every catalog recipe against the ingredients a user has on hand.
- Filter by dietary tags, difficulty and cooking time.
- Rank by match percentage, quicker recipes first on ties.
- Suggest substitutes for missing ingredients.
"""
