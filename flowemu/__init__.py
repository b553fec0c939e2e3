"""Core types for a local blockchain emulator: value types, errors, results, account storage and result logging."""

__version__ = "0.1.0"

__all__ = ["model", "errors", "result", "account_storage", "log_output"]