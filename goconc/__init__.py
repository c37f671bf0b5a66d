"""Go-style channels, select, synchronisation primitives, deferred calls, results and durations."""

__version__ = "0.1.0"