import asyncio
import concurrent.futures

from ._loggerfactory import _LoggerFactory
from ._status import Status, StatusCode

logger = None


def get_logger():
    global logger
    if logger is not None:
        return logger

    logger = _LoggerFactory.get_logger("ErrorHandlers")
    return logger


class StatusError(Exception):
    """
    Exception raised when a traced operation finished with a status other than OK.
    """
    def __init__(self, status: Status):
        if status.is_ok:
            raise ValueError('StatusError requires a status other than OK.')
        status_code = status.status_code
        self.status = status
        self.error_code = status_code.name if status_code is not None else str(status.canonical_code)
        self.message = status.description or ''
        super().__init__(self.message)

    def __repr__(self) -> str:
        """
        Return string representation of the exception.
        """
        return "\nError Code: {}".format(self.error_code) + \
            "\nError Message: {}".format(self.message)

    def __str__(self) -> str:
        return self.__repr__()


# Order matters: subclasses before their bases.
_EXCEPTION_CODES = [
    (asyncio.CancelledError, StatusCode.CANCELLED),
    (concurrent.futures.CancelledError, StatusCode.CANCELLED),
    (TimeoutError, StatusCode.DEADLINE_EXCEEDED),
    (concurrent.futures.TimeoutError, StatusCode.DEADLINE_EXCEEDED),
    (asyncio.TimeoutError, StatusCode.DEADLINE_EXCEEDED),
    (FileNotFoundError, StatusCode.NOT_FOUND),
    (FileExistsError, StatusCode.ALREADY_EXISTS),
    (PermissionError, StatusCode.PERMISSION_DENIED),
    (ConnectionError, StatusCode.UNAVAILABLE),
    (MemoryError, StatusCode.RESOURCE_EXHAUSTED),
    (NotImplementedError, StatusCode.UNIMPLEMENTED),
    (LookupError, StatusCode.NOT_FOUND),
    (ValueError, StatusCode.INVALID_ARGUMENT),
    (TypeError, StatusCode.INVALID_ARGUMENT),
]


def _exception_message(exception: BaseException):
    # str(KeyError('k')) quotes the key.
    if isinstance(exception, KeyError) and len(exception.args) == 1:
        message = str(exception.args[0])
    else:
        message = str(exception)
    return message or None


def status_from_exception(exception: BaseException) -> Status:
    if isinstance(exception, StatusError):
        return exception.status

    code = StatusCode.UNKNOWN
    for exception_type, status_code in _EXCEPTION_CODES:
        if isinstance(exception, exception_type):
            code = status_code
            break
    _LoggerFactory.trace(get_logger(), 'Mapped exception to status.',
                         {'exception': type(exception).__name__, 'code': code.value})
    return Status(code, _exception_message(exception))


def raise_for_status(status: Status) -> None:
    if not status.is_ok:
        raise StatusError(status)
