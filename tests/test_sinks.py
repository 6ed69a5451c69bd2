import json
import logging

import httpx
import pytest

from sdn.config import Endpoint, TransferSummary
from sdn.errors import ProvisioningError
from sdn.sinks import (
    HttpProvisioningSink,
    LoggingSink,
    NotificationSink,
    RecordingSink,
    available_sinks,
    get_sink,
    register_sink,
)
from sdn.sinks import registry as sink_registry


SUMMARY = TransferSummary("src.example.org", "dst.example.org", 2, 300)
ENDPOINT = Endpoint("ftpnode1", "192.168.1.10", 20000)


def test_http_sink_posts_payloads() -> None:
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(201)

    sink = HttpProvisioningSink("http://provisioner.local/", transport=httpx.MockTransport(handler))
    sink.notify(SUMMARY)
    sink.notify_endpoint(ENDPOINT)
    sink.close()

    assert [str(request.url) for request in requests] == [
        "http://provisioner.local/reservations",
        "http://provisioner.local/endpoints",
    ]
    assert json.loads(requests[0].content) == {
        "source_host": "src.example.org",
        "destination_host": "dst.example.org",
        "pair_count": 2,
        "total_size": 300,
    }
    assert json.loads(requests[1].content) == {
        "host": "ftpnode1",
        "ip": "192.168.1.10",
        "port": 20000,
    }


def test_http_sink_raises_provisioning_error_on_http_status() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    sink = HttpProvisioningSink("http://provisioner.local", transport=transport)

    with pytest.raises(ProvisioningError) as excinfo:
        sink.notify(SUMMARY)

    assert "http://provisioner.local/reservations" in str(excinfo.value)


def test_http_sink_raises_provisioning_error_on_connect_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    sink = HttpProvisioningSink("http://provisioner.local", transport=httpx.MockTransport(handler))

    with pytest.raises(ProvisioningError) as excinfo:
        sink.notify_endpoint(ENDPOINT)

    assert "boom" in str(excinfo.value)


def test_http_sink_requires_url() -> None:
    with pytest.raises(ValueError):
        HttpProvisioningSink("")


def test_logging_sink_logs_summary_and_endpoint(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("sdn-tests.sinks")
    sink = LoggingSink(logger)

    with caplog.at_level(logging.INFO, logger=logger.name):
        sink.notify(SUMMARY)
        sink.notify_endpoint(ENDPOINT)

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Between src.example.org and dst.example.org 2 files with a total size of 300 bytes",
        "endpoint 192.168.1.10:20000 for host ftpnode1",
    ]
    assert caplog.records[0]._sdn_total_size == 300


def test_recording_sink_keeps_order() -> None:
    sink = RecordingSink()
    sink.notify(SUMMARY)
    sink.notify_endpoint(ENDPOINT)
    sink.notify(SUMMARY)
    assert sink.summaries == [SUMMARY, SUMMARY]
    assert sink.endpoints == [ENDPOINT]


def test_registry_builds_known_sinks() -> None:
    assert isinstance(get_sink("memory"), RecordingSink)
    assert isinstance(get_sink("log", logger=logging.getLogger("sdn-tests.registry")), LoggingSink)
    http_sink = get_sink("http", url="http://provisioner.local")
    assert isinstance(http_sink, HttpProvisioningSink)
    http_sink.close()


def test_registry_rejects_unknown_sink() -> None:
    with pytest.raises(ValueError):
        get_sink("carrier-pigeon")


def test_register_custom_sink(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sink_registry, "_REGISTRY", dict(sink_registry._REGISTRY))

    class CountingSink(NotificationSink):
        name = "counting"

        def __init__(self) -> None:
            self.count = 0

        def notify(self, summary: TransferSummary) -> None:
            self.count += 1

        def notify_endpoint(self, endpoint: Endpoint) -> None:
            self.count += 1

    register_sink(CountingSink)
    sink = get_sink("counting")
    sink.notify(SUMMARY)
    assert sink.count == 1
    assert "counting" in available_sinks()


def test_builtin_sinks_are_available() -> None:
    assert {"log", "http", "memory"} <= available_sinks()
    assert "counting" not in available_sinks()
