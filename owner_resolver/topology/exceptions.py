class TopologyError(Exception):
    """Raised when the execution topology cannot be determined."""
