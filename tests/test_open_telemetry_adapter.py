from opentelemetry.trace import Status as OtelStatus, StatusCode as OtelStatusCode

from tracestatus import Status, StatusCode, DESCRIPTIONS, to_otel_status, from_otel_status


def test_ok_maps_to_otel_ok():
    otel_status = to_otel_status(Status.ok())
    assert otel_status.status_code is OtelStatusCode.OK
    assert otel_status.description is None


def test_custom_ok_maps_to_otel_ok():
    assert to_otel_status(Status(0, 'fine')).status_code is OtelStatusCode.OK


def test_error_maps_to_otel_error():
    otel_status = to_otel_status(Status(StatusCode.PERMISSION_DENIED, 'no access'))
    assert otel_status.status_code is OtelStatusCode.ERROR
    assert otel_status.description == 'no access'


def test_none_passes_through():
    assert to_otel_status(None) is None
    assert from_otel_status(None) is None


def test_otel_unset_and_ok_map_to_shared_ok():
    assert from_otel_status(OtelStatus(OtelStatusCode.UNSET)) is Status.ok()
    assert from_otel_status(OtelStatus(OtelStatusCode.OK)) is Status.ok()


def test_otel_error_maps_to_unknown():
    status = from_otel_status(OtelStatus(OtelStatusCode.ERROR, 'boom'))
    assert status == Status(StatusCode.UNKNOWN, 'boom')

    status = from_otel_status(OtelStatus(OtelStatusCode.ERROR))
    assert status.canonical_code == StatusCode.UNKNOWN.value
    assert status.description == DESCRIPTIONS[2]
