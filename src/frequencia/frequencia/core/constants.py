"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CLASS_CAPACITY = 40
LEGACY_CLASS_CAPACITY = 2
DEFAULT_ABSENCE_LIMIT = 5
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
