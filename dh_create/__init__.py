"""dh-create: scaffold DataHarmonizer web projects from LinkML schemas."""

__version__ = "0.1.0"
