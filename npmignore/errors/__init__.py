class NpmignoreError(Exception):
    """Base class for errors raised by the npmignore library."""


class InvalidInputError(NpmignoreError, ValueError):
    """Raised when required text input is missing (``None``)."""


__all__ = ["NpmignoreError", "InvalidInputError"]
