"""structgen: render resolved type graphs as Superstruct validators."""

__version__ = "0.1.0"
