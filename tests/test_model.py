import pytest

from pycfgline import ConfigLine, ConfigSection, KeyNotFound, LineKind, TrackedSection
from pycfgline.model import find, removeElement


def test_insert_is_first_write_wins() -> None:
    sect = ConfigSection()
    sect.insert("k", "a")
    sect.insert("k", "b")
    assert sect.get("k") == "a"
    sect.update("k", "b")
    assert sect.get("k") == "b"


def test_update_ignores_absent_keys() -> None:
    sect = ConfigSection()
    sect.update("missing", 1)
    assert not sect.exists("missing")
    assert len(sect) == 0


def test_indexed_access_creates() -> None:
    sect = ConfigSection()
    assert not sect.exists("k")
    cell = sect["k"]
    assert cell == ""
    assert sect.exists("k")
    cell.set(5)
    assert sect.get("k").toInt() == 5


def test_indexed_write() -> None:
    sect = ConfigSection()
    sect["a"] = 1
    sect["b"] = True
    sect["a"] = 2
    assert list(sect) == ["a", "b"]
    assert sect.get("a") == "2"
    assert sect.get("b").toBool() is True


def test_get_and_pop_raise_key_not_found() -> None:
    sect = ConfigSection()
    with pytest.raises(KeyNotFound):
        sect.get("nope")
    with pytest.raises(KeyError):
        sect.pop("nope")
    assert sect.get("nope", None) is None
    assert sect.pop("nope", "fallback") == "fallback"
    assert "nope" not in sect


def test_pop_and_remove() -> None:
    sect = ConfigSection()
    sect.insert("a", 1)
    sect.insert("b", 2)
    assert sect.pop("a") == "1"
    assert list(sect) == ["b"]
    sect.remove("b")
    sect.remove("b")
    assert list(sect) == []
    assert not sect.exists("b")


def test_iteration_order_and_restart() -> None:
    sect = ConfigSection()
    for key in ("z", "a", "m"):
        sect.insert(key, key)
    assert list(sect) == ["z", "a", "m"]
    assert list(sect) == ["z", "a", "m"]
    assert [k for k, _ in sect.items()] == ["z", "a", "m"]
    sect.clear()
    assert list(sect) == []
    assert len(sect) == 0


def test_tracked_section_keeps_records_in_sync() -> None:
    lines = [ConfigLine(LineKind.COMMENT, "# note")]
    sect = TrackedSection(lines)
    sect.insert("a", 1)
    sect["b"] = 2
    sect["b"] = 3
    sect.insert("a", 9)
    assert [(i.kind, i.content) for i in lines] == [
        (LineKind.COMMENT, "# note"),
        (LineKind.VALUE, "a"),
        (LineKind.VALUE, "b"),
    ]
    sect.remove("a")
    assert [i.content for i in lines] == ["# note", "b"]
    assert sect.pop("b") == "3"
    assert [i.content for i in lines] == ["# note"]
    sect["c"] = 1
    sect.clear()
    assert lines == [ConfigLine(LineKind.COMMENT, "# note")]


def test_sequence_helpers() -> None:
    seq = ["a", "b", "a"]
    assert find(seq, "a") == 0
    assert find(seq, "x") == -1
    removeElement(seq, "a")
    assert seq == ["b", "a"]
    removeElement(seq, "x")
    assert seq == ["b", "a"]
