"""Package-specific exceptions."""


class DiffLifeError(Exception):
    """Base class for errors raised by difflife."""
