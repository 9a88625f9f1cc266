"""Instance storage layer.

This module keeps the append-only delta ledger shared by all views of an
instance and folds it into per-version field state on read.
"""
