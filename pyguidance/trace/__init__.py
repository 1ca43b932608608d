"""
Trace module for the pyguidance library.

This module converts route instructions into a timestamped trace:
- Interpolation: distribute an instruction's time over its geometry by distance
- Route: fold the interpolation over a whole route and lay results out as tables
"""

# Interpolation
from pyguidance.trace.interpolation import TraceSample, fill_trace

# Route
from pyguidance.trace.route import (
    iter_trace,
    create_trace,
    trace_to_dataframe,
    instructions_to_records,
    instructions_to_dataframe,
)

__all__ = [
    # Interpolation
    'TraceSample',
    'fill_trace',
    # Route
    'iter_trace',
    'create_trace',
    'trace_to_dataframe',
    'instructions_to_records',
    'instructions_to_dataframe',
]
