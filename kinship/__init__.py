"""
kinship: layout engine for a personal relationship dashboard.

Wires the compute packages together for the two contact screens:

    regions   three category circles sized to the container
    forces    chips settled inside their circle(s)
    radial    urgency-sized balls swept around the heading
    drift     per-ball ambient motion, stable per id

This package adds configuration, contact records, the sorting board,
row building for both screens, tabular export and the CLI.
"""

__version__ = '0.1.0'
