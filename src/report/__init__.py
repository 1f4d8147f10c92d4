"""Report orchestration and presentation.

This module drives source reading, graph construction, traversal, and
aggregation, then renders the results as text lines or JSON.
"""
