"""In-memory contact directory.

Validated contact entities plus an identifier-keyed directory whose updates
are all-or-nothing.
"""

__version__ = "0.1.0"
