"""
Canonical status of a traced operation.

A :class:`Status` records whether an operation succeeded or which class of failure it hit, using the fixed
code space shared by RPC and tracing ecosystems (see :class:`StatusCode`).
"""
from ._status import Status, StatusCode, DESCRIPTIONS, get_description
from ._open_telemetry_adapter import to_otel_status, from_otel_status
from .errorhandlers import StatusError, status_from_exception, raise_for_status
from ._loggerfactory import version as __version__

__all__ = [
    'Status',
    'StatusCode',
    'DESCRIPTIONS',
    'get_description',
    'to_otel_status',
    'from_otel_status',
    'StatusError',
    'status_from_exception',
    'raise_for_status',
]
