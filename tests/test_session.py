import logging

import pytest

from sdn.config import PLUGIN_NAME, TransferSummary
from sdn.control.events import TransferEvent
from sdn.control.session import SdnPlugin, SdnSession
from sdn.errors import SessionRegistrationError
from sdn.metadata.local import MappingQuery
from sdn.replay import ReplayEngine
from sdn.sinks.memory import RecordingSink


class _ClosableQuery(MappingQuery):
    def __init__(self, sizes) -> None:
        super().__init__(sizes)
        self.closed = False

    def close(self) -> None:
        self.closed = True


class _RefusingEngine:
    def add_event_callback(self, callback, release) -> None:  # noqa: ARG002
        raise RuntimeError("listener table full")


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("sdn-tests.session")


def test_plugin_name() -> None:
    assert SdnPlugin.get_name() == PLUGIN_NAME == "SDN"


def test_copy_enter_hook_registers_session(logger: logging.Logger) -> None:
    sink = RecordingSink()
    plugin = SdnPlugin(lambda context: MappingQuery({"a": 4}), sink, logger=logger)
    engine = ReplayEngine()

    session = plugin.copy_enter_hook(engine, context="copy-1")
    engine.emit(
        [
            TransferEvent("LIST:ENTER"),
            TransferEvent("LIST:ITEM", "a => b"),
            TransferEvent("LIST:EXIT"),
        ]
    )

    assert session.context == "copy-1"
    assert sink.summaries == [TransferSummary(None, None, 1, 4)]
    engine.finish()
    assert session.closed is True


def test_each_copy_gets_its_own_registry(logger: logging.Logger) -> None:
    sink = RecordingSink()
    plugin = SdnPlugin(lambda context: MappingQuery({"a": 1, "b": 2}), sink, logger=logger)
    first_engine = ReplayEngine()
    second_engine = ReplayEngine()

    first = plugin.copy_enter_hook(first_engine)
    second = plugin.copy_enter_hook(second_engine)
    first_engine.emit([TransferEvent("LIST:ITEM", "a => x")])
    second_engine.emit([TransferEvent("LIST:ITEM", "b => y"), TransferEvent("LIST:EXIT")])

    assert first.registry is not second.registry
    assert len(first.registry) == 1
    assert sink.summaries == [TransferSummary(None, None, 1, 2)]


def test_registration_failure_is_prefixed_and_releases_session(logger: logging.Logger) -> None:
    queries = []

    def factory(context):
        query = _ClosableQuery({})
        queries.append(query)
        return query

    plugin = SdnPlugin(factory, RecordingSink(), logger=logger)

    with pytest.raises(SessionRegistrationError) as excinfo:
        plugin.copy_enter_hook(_RefusingEngine())

    assert str(excinfo.value) == "copy_enter_hook: listener table full"
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert queries[0].closed is True


def test_session_releases_resources_on_error(logger: logging.Logger) -> None:
    query = _ClosableQuery({"a": 1})

    with pytest.raises(RuntimeError):
        with SdnSession(query, RecordingSink(), logger=logger) as session:
            session(TransferEvent("LIST:ITEM", "a => b"))
            raise RuntimeError("copy aborted")

    assert session.closed is True
    assert query.closed is True
    assert len(session.registry) == 0
    assert session.metadata_query is None


def test_closed_session_ignores_events(logger: logging.Logger) -> None:
    sink = RecordingSink()
    session = SdnSession(MappingQuery({}), sink, logger=logger)
    session.close()
    session.close()

    assert session(TransferEvent("LIST:EXIT")) is None
    assert sink.summaries == []


def test_plugin_close_closes_sink(logger: logging.Logger) -> None:
    sink = RecordingSink()
    plugin = SdnPlugin(lambda context: MappingQuery({}), sink, logger=logger)
    plugin.close()
    assert sink.closed is True
