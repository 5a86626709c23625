class InvalidArgumentError(ValueError):
    """A required vertex argument was None."""
