# tests/test_metadata.py
import pytest

from hcs2.core.metadata import CollectorState, MetadataCollector, collect_metadata
from conftest import ScriptedPrompter


def test_collector_starts_collecting():
    collector = MetadataCollector()
    assert collector.state is CollectorState.COLLECTING
    assert collector.metadata == {}


def test_collector_stops_on_decline():
    collector = MetadataCollector()
    collector.add("color", "red")
    assert collector.answer_continue(True) is CollectorState.COLLECTING
    collector.add("size", "xl")
    assert collector.answer_continue(False) is CollectorState.DONE
    assert collector.done
    assert collector.metadata == {"color": "red", "size": "xl"}


def test_collector_last_write_wins():
    collector = MetadataCollector()
    collector.add("color", "red")
    collector.add("color", "blue")
    assert collector.metadata == {"color": "blue"}


def test_collector_rejects_input_after_done():
    collector = MetadataCollector()
    collector.answer_continue(False)
    with pytest.raises(RuntimeError):
        collector.add("late", "value")
    with pytest.raises(RuntimeError):
        collector.answer_continue(True)


def test_collector_metadata_is_a_copy():
    collector = MetadataCollector()
    collector.add("k", "v")
    snapshot = collector.metadata
    snapshot["other"] = "x"
    assert collector.metadata == {"k": "v"}


def test_collect_metadata_interactive_loop():
    prompter = ScriptedPrompter("color", "red", True, "color", "blue", True, "size", "m", False)
    assert collect_metadata(prompter) == {"color": "blue", "size": "m"}
    assert prompter.asked[:3] == [
        "Enter metadata key:",
        "Enter value for color:",
        "Do you want to add more metadata?",
    ]
    assert prompter.answers == []
