"""Standard column names used for GeoDataFrames built from GPS tracks.

These constants define the column keys used by the Track construct and the frames it
produces. Using consistent keys keeps track frames and projected frames interchangeable.
"""

# Column holding the horizontal accuracy radius (meters) reported with each fix
DEFAULT_ACCURACY_KEY = "accuracy_m"

# Column holding the fix timestamp (milliseconds since the epoch, as the device reports it)
DEFAULT_TIMESTAMP_KEY = "timestamp"

# Columns holding National Grid coordinates in projected frames
DEFAULT_EASTING_KEY = "easting"
DEFAULT_NORTHING_KEY = "northing"

# Column holding the encoded grid reference string
DEFAULT_GRID_REFERENCE_KEY = "grid_reference"
