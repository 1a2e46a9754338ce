class ClaraError(Exception):
    """Base error for the project."""

class InvalidPathError(ClaraError):
    pass
