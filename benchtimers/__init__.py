"""CPU and wall-clock timers and RFC 3339 timestamps for benchmarking."""

__version__ = "0.1.0"
__all__ = ["timers"]