"""Thread-safe in-memory bank ledger and concurrent account simulation."""

__version__ = "1.0.0"
__all__ = ["account", "bank", "simulation", "transaction"]