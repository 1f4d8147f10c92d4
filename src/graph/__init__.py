"""Similarity graph over name records.

This module stores records as nodes linked by shared gender and ethnicity.
It supports append-only construction and reachability traversal.
"""
