from __future__ import annotations


class PortfolioError(Exception):
    """Base class for failures surfaced to the user as a status message."""


class ValidationError(PortfolioError):
    pass


class FileReadError(PortfolioError):
    pass


class NoFileAttachedError(PortfolioError):
    pass


class MissingCredentialError(PortfolioError):
    pass


class RemoteRejectionError(PortfolioError):
    """The contents API answered a write with a non-2xx status."""

    def __init__(self, status: int, remote_message: str) -> None:
        super().__init__(remote_message)
        self.status = status
        self.remote_message = remote_message


RemoteConflictOrRejection = RemoteRejectionError


class TransportError(PortfolioError):
    pass
