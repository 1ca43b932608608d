"""
pyguidance - A Python library for turn-by-turn route guidance output.

pyguidance models the instructions of a computed route and turns them into
text for a person and into a timestamped trace for playback or export.

Components
----------
- **guidance**: Instruction data model, compass direction and turn descriptions
- **trace**: Distance-proportional time interpolation over instruction geometry
- **utilities**: Geodesic geometry, coordinate lists and message translation

Quick Start
-----------
```python
import pandas as pd
import pyguidance as pyg
from pyguidance.guidance import InstructionBuilder, TurnSign
from pyguidance.utilities import PointList

route = [
    InstructionBuilder(TurnSign.CONTINUE_ON_STREET, "Main St",
                       points=PointList.from_coords([(52.5200, 13.4050), (52.5210, 13.4050)]))
    .set_distance(222.6).set_time(40000).build(),
    InstructionBuilder(TurnSign.LEFT, "Oak Ave",
                       points=PointList.from_coords([(52.5220, 13.4050)]))
    .set_distance(68.0).set_time(12000).build(),
    InstructionBuilder(TurnSign.FINISH,
                       points=PointList.from_coords([(52.5220, 13.4060)]))
    .set_distance(0).set_time(0).build(),
]

# Maneuver text
tr = pyg.utilities.default_translation()
texts = [pyg.guidance.turn_description(instr, tr) for instr in route]

# Timestamped trace
trace = pyg.trace.create_trace(route)
df = pyg.trace.trace_to_dataframe(trace, origin=pd.Timestamp("2024-05-01 08:00"))
```
"""

from pyguidance._version import __version__, __version_info__
from pyguidance import guidance, trace, utilities
from pyguidance.exceptions import InvalidInstructionError

__all__ = [
    '__version__',
    '__version_info__',
    'InvalidInstructionError',
    'guidance',
    'trace',
    'utilities',
]
