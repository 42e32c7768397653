"""Integer-backed set types over enum classes, with operators, integer forms and serialization."""

__version__ = "0.1.0"