"""Exceptions raised by the catalog, its books and the report writer."""


class LibraryError(Exception):
    """Base class for every error the menu reports and recovers from."""


class DuplicateIdError(LibraryError, ValueError):
    pass


class InvalidArgumentError(LibraryError, ValueError):
    pass


class AlreadyIssuedError(LibraryError):
    pass


class NotIssuedError(LibraryError):
    pass


class ReportError(LibraryError, OSError):
    """The report file could not be opened for appending."""
