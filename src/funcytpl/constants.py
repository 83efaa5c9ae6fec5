from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the marker grammar tokens to reduce cross-module coupling.
"""

# Marker delimiters: <!$ name argument>
START_TOKEN: str = '<!$'
CLOSE_TOKEN: str = '>'

# Prefix for every logger created through funcytpl.logging.helpers.
LOGGER_ROOT: str = 'funcytpl'
