"""Job application tracker: record store API and client."""

__version__ = "1.0.0"
