from typing import Optional

from opentelemetry.trace import Status as OtelStatus, StatusCode as OtelStatusCode

from ._status import Status, StatusCode


def to_otel_status(status: Optional[Status]) -> Optional[OtelStatus]:
    # OpenTelemetry only keeps a description on ERROR.
    if status is None:
        return None
    if status.is_ok:
        return OtelStatus(OtelStatusCode.OK)
    return OtelStatus(OtelStatusCode.ERROR, status.description)


def from_otel_status(otel_status: Optional[OtelStatus]) -> Optional[Status]:
    if otel_status is None:
        return None
    if otel_status.status_code is OtelStatusCode.ERROR:
        return Status(StatusCode.UNKNOWN, otel_status.description or None)
    return Status.new(StatusCode.OK)
