"""
Recipe Finder service.

Ranks a recipe catalog against the ingredients a user has on hand, with
dietary, difficulty and cooking-time filters, and suggests substitutes for
whatever is missing.
"""
