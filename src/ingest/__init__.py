"""Name row ingestion.

This module reads delimited name rows and validates them into records.
It feeds typed records to the similarity graph builder.
"""
