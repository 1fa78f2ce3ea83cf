"""
secstore custom exceptions.
"""


class SecStoreError(Exception):
    """Base exception for secstore."""

    pass


class InvalidArgumentError(SecStoreError, ValueError):
    """Missing collaborator or record."""

    pass


class UnsupportedOperationError(SecStoreError, NotImplementedError):
    """Operation is deliberately not offered by this storage."""

    pass


class RegistryError(SecStoreError):
    """Persistent registry failed to read or write."""

    pass
