"""dept-roster — interactive in-memory department roster.

Records which people belong to which department and reports them,
sorted alphabetically, through a line-oriented command interface.
"""

from dept_roster.version import __version__

__all__: list[str] = ["__version__"]
