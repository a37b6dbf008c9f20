from typing import NewType, Tuple


Radians = NewType('Radians', float)
Degrees = NewType('Degrees', float)

LATLON_TYPE = Tuple[float, float]
GRID_TYPE = Tuple[int, int]
