"""Errors raised while auditing string catalogs."""


class PolyglotError(Exception):
    """Base class for fatal audit errors. Carries the offending path."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class DirectoryUnreadableError(PolyglotError):
    """The scan root could not be listed."""

    def __init__(self, path: str):
        super().__init__(path, f'Directory "{path}" could not be read')


class FileUnprocessableError(PolyglotError):
    """A catalog could not be read or does not have the expected shape."""

    def __init__(self, path: str):
        super().__init__(path, f'File "{path}" could not be processed')
