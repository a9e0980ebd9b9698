from .reporter import StatusFn, StatusReporter

__all__ = ["StatusFn", "StatusReporter"]
