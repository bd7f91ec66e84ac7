"""
Tests for the region source loader.
"""
import pytest

from map_colorer.core.error_handling import LoadError
from map_colorer.core.geometry import Rect
from map_colorer.loader import load_map, parse_record, parse_regions


def test_parse_regions_in_input_order():
    region_map = parse_regions("b 0 0 10 10\na 5 5 15 15\n")
    assert [r.name for r in region_map] == ["b", "a"]
    assert region_map[1].rect == Rect(5, 5, 15, 15)
    assert all(r.color == 0 for r in region_map)
    assert not region_map.neighbors_computed


def test_blank_lines_skipped():
    text = "\nA 0 0 1 1\n\n   \t\nB 2 2 3 3\n\n"
    assert [r.name for r in parse_regions(text)] == ["A", "B"]


def test_fields_may_be_separated_by_any_whitespace():
    name, rect = parse_record("  Spain\t-10   35 3  44 ")
    assert name == "Spain"
    assert rect == Rect(-10, 35, 3, 44)


def test_extra_fields_are_ignored():
    _, rect = parse_record("A 0 0 1 1 trailing")
    assert rect == Rect(0, 0, 1, 1)


def test_accepts_iterable_of_lines():
    assert len(parse_regions(["A 0 0 1 1", "", "B 2 2 3 3"])) == 2


def test_malformed_integer():
    with pytest.raises(LoadError) as excinfo:
        parse_regions("A 0 0 1 1\nB 0 x 1 1\n", source="map.txt")
    assert excinfo.value.message == "Rectangle bounds must be integers"
    assert excinfo.value.context == {"source": "map.txt", "line": 2}
    assert isinstance(excinfo.value.original_error, ValueError)


def test_missing_fields():
    with pytest.raises(LoadError) as excinfo:
        parse_regions("A 0 0 1\n")
    assert excinfo.value.context["line"] == 1
    assert isinstance(excinfo.value.original_error, IndexError)


def test_inverted_rectangle():
    with pytest.raises(LoadError) as excinfo:
        parse_regions("A 10 0 0 5\n")
    assert "xmin" in excinfo.value.message


def test_duplicate_name():
    with pytest.raises(LoadError) as excinfo:
        parse_regions("A 0 0 1 1\nA 2 2 3 3\n", source="dup.txt")
    assert "Duplicate" in excinfo.value.message
    assert excinfo.value.context == {"source": "dup.txt", "line": 2}


def test_degenerate_rectangle_allowed():
    region_map = parse_regions("line 0 0 10 0\n")
    assert region_map[0].rect.height == 0


def test_load_map(tmp_path):
    path = tmp_path / "europe.txt"
    path.write_text("France 0 0 10 10\nGermany 8 0 20 10\n")
    region_map = load_map(path)
    assert [r.name for r in region_map] == ["France", "Germany"]


def test_load_missing_file(tmp_path):
    with pytest.raises(LoadError) as excinfo:
        load_map(tmp_path / "missing.txt")
    assert excinfo.value.context["source"].endswith("missing.txt")


def test_load_error_names_source_in_message(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("A 0 0 1 one\n")
    with pytest.raises(LoadError) as excinfo:
        load_map(path)
    assert str(path) in str(excinfo.value)


def test_load_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"\xff\xfe A 0 0 1 1\n")
    with pytest.raises(LoadError) as excinfo:
        load_map(path)
    assert "UTF-8" in excinfo.value.message
    assert excinfo.value.context == {"source": str(path)}
    assert isinstance(excinfo.value.original_error, UnicodeDecodeError)


@pytest.mark.parametrize("word", ["1_0", "0x1f", "1e3", "+", "٣"])
def test_bounds_must_be_plain_integers(word):
    with pytest.raises(LoadError) as excinfo:
        parse_record(f"A 0 0 {word} 10", source="map.txt", line_number=3)
    assert excinfo.value.message == "Rectangle bounds must be integers"
    assert excinfo.value.context == {"source": "map.txt", "line": 3}


def test_signed_bounds():
    _, rect = parse_record("A -5 +0 +7 12")
    assert rect == Rect(-5, 0, 7, 12)
