"""
Constants declarations for israelgrids
"""

# Decimal places kept on WGS84 output (about 1.1cm)
DEGREE_PRECISION = 7

# Practical operating envelope of the local grids, WGS84 decimal degrees (min, max)
ENVELOPE_LAT = (29.0, 34.0)
ENVELOPE_LON = (34.0, 36.0)

# Nominal offset between the grids: ITM = ICS + offset (meters)
ICS_TO_ITM_EASTING = 50_000
ICS_TO_ITM_NORTHING = -500_000
