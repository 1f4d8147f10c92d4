"""Grouped aggregation over name records.

This module derives per-group totals and starting-letter histograms.
All derivations are read-only over the graph's node sequence.
"""
