"""Application errors mapped to HTTP responses by main.py."""


class AppError(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def status(self) -> str:
        return "fail" if 400 <= self.status_code < 500 else "error"


class RecordNotFoundError(AppError):
    """A requested user or job does not exist in the record store."""
    status_code = 404


class DataAccessError(AppError):
    """The record store could not return records."""
    status_code = 500
