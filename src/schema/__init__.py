"""Schema lineage layer.

This module models field schemas as an append-only arena of versions
and translates recorded writes between any two related versions.
"""
