class SyncFailure(Exception):
    """The sync attempt did not complete.

    ``detail`` may be any value, not only a message string; it is what gets
    reported back to the caller.
    """

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail


class ConfigError(Exception):
    pass


class NangoError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def format_failure(failure) -> str:
    """Render any failure value as display text without raising."""
    try:
        if isinstance(failure, SyncFailure):
            return str(failure.detail)
        if isinstance(failure, BaseException):
            message = str(failure)
            name = type(failure).__name__
            return f"{name}: {message}" if message else name
        return str(failure)
    except Exception:
        return f"<unprintable {type(failure).__name__}>"
