"""Ingestion layer.

Turns raw input text into validated domain values and parsed lines.
"""

__all__: list[str] = []
