"""Errors raised by the document model store."""


class ModelError(Exception):
    """Base class for model store failures."""
    pass


class DuplicateElementError(ModelError):
    """An element with the same identifier already exists in the document."""
    pass


class DuplicateNamespaceError(ModelError):
    """A document with the same namespace is already held by the store."""
    pass


class OwnershipError(ModelError):
    """A file is already owned by another package."""
    pass


class UnknownElementError(ModelError):
    """The referenced element does not exist in the document."""
    pass
