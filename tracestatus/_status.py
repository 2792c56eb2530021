import enum
import threading
from types import MappingProxyType
from typing import Optional, Union

from ._constants import OK_DESCRIPTION
from ._loggerfactory import _LoggerFactory

logger = None


def get_logger():
    global logger
    if logger is not None:
        return logger

    logger = _LoggerFactory.get_logger("Status")
    return logger


class StatusCode(enum.Enum):
    """Canonical status codes. The integer values are stable and must never be renumbered."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16

    @classmethod
    def from_int(cls, value: int) -> Optional['StatusCode']:
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def description(self) -> str:
        return DESCRIPTIONS[self.value]


DESCRIPTIONS = MappingProxyType({
    0: OK_DESCRIPTION,
    1: 'The operation was cancelled, typically by the caller.',
    2: 'Unknown error. For example, this error may be returned when a Status value received from another address '
       'space belongs to an error space that is not known in this address space. Also errors raised by APIs that '
       'do not return enough error information may be converted to this error.',
    3: 'The client specified an invalid argument. Note that this differs from FAILED_PRECONDITION. '
       'INVALID_ARGUMENT indicates arguments that are problematic regardless of the state of the system '
       '(e.g., a malformed file name).',
    4: 'The deadline expired before the operation could complete. For operations that change the state of the '
       'system, this error may be returned even if the operation has completed successfully. For example, a '
       'successful response from a server could have been delayed long',
    5: 'Some requested entity (e.g., file or directory) was not found. Note to server developers: if a request is '
       'denied for an entire class of users, such as gradual feature rollout or undocumented whitelist, NOT_FOUND '
       'may be used. If a request is denied for some users within a class of users, such as user-based access '
       'control, PERMISSION_DENIED must be used.',
    6: 'The entity that a client attempted to create (e.g., file or directory) already exists.',
    7: 'The caller does not have permission to execute the specified operation. PERMISSION_DENIED must not be used '
       'for rejections caused by exhausting some resource (use RESOURCE_EXHAUSTED instead for those errors). '
       'PERMISSION_DENIED must not be used if the caller can not be identified (use UNAUTHENTICATED instead for '
       'those errors). This error code does not imply the request is valid or the requested entity exists or '
       'satisfies other pre-conditions.',
    8: 'Some resource has been exhausted, perhaps a per-user quota, or perhaps the entire file system is out of '
       'space.',
    9: 'The operation was rejected because the system is not in a state required for the operation\'s execution. '
       'For example, the directory to be deleted is non-empty, an rmdir operation is applied to a non-directory, '
       'etc. Service implementors can use the following guidelines to decide between FAILED_PRECONDITION, ABORTED, '
       'and UNAVAILABLE: (a) Use UNAVAILABLE if the client can retry just the failing call. (b) Use ABORTED if the '
       'client should retry at a higher level (e.g., when a client-specified test-and-set fails, indicating the '
       'client should restart a read-modify-write sequence). (c) Use FAILED_PRECONDITION if the client should not '
       'retry until the system state has been explicitly fixed. E.g., if an "rmdir" fails because the directory '
       'is non-empty, FAILED_PRECONDITION should be returned since the client should not retry unless the files '
       'are deleted from the directory.',
    10: 'The operation was aborted, typically due to a concurrency issue such as a sequencer check failure or '
        'transaction abort. See the guidelines above for deciding between FAILED_PRECONDITION, ABORTED, and '
        'UNAVAILABLE.',
    11: 'The operation was attempted past the valid range. E.g., seeking or reading past end-of-file. Unlike '
        'INVALID_ARGUMENT, this error indicates a problem that may be fixed if the system state changes. For '
        'example, a 32-bit file system will generate INVALID_ARGUMENT if asked to read at an offset that is not in '
        'the range [0,2^32-1], but it will generate OUT_OF_RANGE if asked to read from an offset past the current '
        'file size. There is a fair bit of overlap between FAILED_PRECONDITION and OUT_OF_RANGE. We recommend '
        'using OUT_OF_RANGE (the more specific error) when it applies so that callers who are iterating through a '
        'space can easily look for an OUT_OF_RANGE error to detect when they are done.',
    12: 'The operation is not implemented or is not supported/enabled in this service.',
    13: 'Internal errors. This means that some invariants expected by the underlying system have been broken. This '
        'error code is reserved for serious errors.',
    14: 'The service is currently unavailable. This is most likely a transient condition, which can be corrected by '
        'retrying with a backoff. Note that it is not always safe to retry non-idempotent operations.',
    15: 'Unrecoverable data loss or corruption.',
    16: 'The request does not have valid authentication credentials for the operation.',
})


def _to_int(code: Union[StatusCode, int]) -> int:
    if isinstance(code, StatusCode):
        return code.value
    return int(code)


def get_description(code: Union[StatusCode, int]) -> Optional[str]:
    return DESCRIPTIONS.get(_to_int(code))


class Status:
    """Outcome of a traced operation.

    A status is a canonical code plus an optional description. When no description is given the canonical
    text for the code is used; codes without a canonical entry are accepted as-is and carry no description.

    Two statuses are equal when both their codes and descriptions are equal. Use :meth:`new` rather than the
    constructor on hot paths: success statuses with the default description are served from a shared instance.
    """

    __slots__ = ('_canonical_code', '_description')

    _ok = None  # type: Optional[Status]
    _ok_lock = threading.Lock()

    def __init__(self, canonical_code: Union[StatusCode, int] = StatusCode.OK, description: Optional[str] = None):
        code = _to_int(canonical_code)
        if description is None:
            description = DESCRIPTIONS.get(code)
            if description is None:
                _LoggerFactory.trace(get_logger(), 'Status created with non-canonical code.', {'code': code})
        object.__setattr__(self, '_canonical_code', code)
        object.__setattr__(self, '_description', description)

    @classmethod
    def new(cls, canonical_code: Union[StatusCode, int], description: Optional[str] = None) -> 'Status':
        if _to_int(canonical_code) == StatusCode.OK.value and (description is None or description == OK_DESCRIPTION):
            return cls.ok()
        return cls(canonical_code, description)

    @classmethod
    def ok(cls) -> 'Status':
        ok = Status._ok
        if ok is None:
            ok = cls.init_ok()
        return ok

    @classmethod
    def init_ok(cls) -> 'Status':
        with Status._ok_lock:
            if Status._ok is None:
                Status._ok = Status(StatusCode.OK)
            return Status._ok

    @property
    def canonical_code(self) -> int:
        return self._canonical_code

    @property
    def status_code(self) -> Optional[StatusCode]:
        return StatusCode.from_int(self._canonical_code)

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def is_ok(self) -> bool:
        return self._canonical_code == StatusCode.OK.value

    def __setattr__(self, name, value):
        raise AttributeError('Status is immutable.')

    def __delattr__(self, name):
        raise AttributeError('Status is immutable.')

    def __reduce__(self):
        return self.__class__, (self._canonical_code, self._description)

    def __eq__(self, other):
        if not isinstance(other, Status):
            return NotImplemented
        return self._canonical_code == other._canonical_code and self._description == other._description

    def __hash__(self):
        return hash((self._canonical_code, self._description))

    def __repr__(self) -> str:
        status_code = self.status_code
        code = status_code.name if status_code is not None else self._canonical_code
        return 'Status(canonical_code={}, description={!r})'.format(code, self._description)


Status.init_ok()
