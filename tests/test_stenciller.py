import logging

import pytest

from stencil_printer.errors import StencilErrorKind, StencilNotFoundError, TemplateError
from stencil_printer.layout.columns import column_widths, strip_ansi, visible_length
from stencil_printer.layout.terminal import AnsiColorizer
from stencil_printer.stenciller import Stenciller

RED_Y = "\x1b[31my\x1b[0m"


def test_greet_scenario(stenciller: Stenciller) -> None:
    stenciller.add_template_stencil("greet", "Hello, {{name}}!", {})
    assert stenciller.apply_template_stencil("greet", {"name": "Ada"}) == "Hello, Ada!"


def test_template_fields_are_colorized(stenciller: Stenciller) -> None:
    stenciller.add_template_stencil("greet", "Hello, {{name}} ({{role}})", {"name": "red"})
    result = stenciller.apply_template_stencil("greet", {"name": "Ada", "role": "admin"})
    assert result == "Hello, \x1b[31mAda\x1b[0m (admin)"


def test_template_missing_key_renders_empty(stenciller: Stenciller) -> None:
    stenciller.add_template_stencil("greet", "Hello, {{name}}!")
    assert stenciller.apply_template_stencil("greet", {}) == "Hello, !"


def test_template_unknown_color_falls_back(stenciller: Stenciller) -> None:
    stenciller.add_template_stencil("greet", "{{name}}", {"name": "chartreuse"})
    assert stenciller.apply_template_stencil("greet", {"name": "Ada"}) == "Ada"


def test_template_not_found(stenciller: Stenciller) -> None:
    with pytest.raises(StencilNotFoundError):
        stenciller.apply_template_stencil("missing", {})


def test_malformed_template_reports_stencil_id(stenciller: Stenciller) -> None:
    stenciller.add_template_stencil("broken", "Hello, {{name")
    with pytest.raises(TemplateError) as excinfo:
        stenciller.apply_template_stencil("broken", {"name": "Ada"})
    assert excinfo.value.stencil_id == "broken"
    assert excinfo.value.kind is StencilErrorKind.TEMPLATE_ERROR
    assert "broken" in str(excinfo.value)


def test_color_row_does_not_mutate_input(stenciller: Stenciller) -> None:
    data = {"a": "1", "b": "2", "c": 3, "d": None}
    colored = stenciller.color_row({"a": "green", "b": "nope", "z": "red"}, data)
    assert colored == {"a": "\x1b[32m1\x1b[0m", "b": "2", "c": "3", "d": ""}
    assert data == {"a": "1", "b": "2", "c": 3, "d": None}


def test_color_row_only_calls_colorizer_for_mapped_keys(stenciller: Stenciller, stub_colorizer) -> None:
    stenciller.color_row({"a": "red"}, {"a": "x", "b": "y"})
    assert stub_colorizer.calls == [("x", "red")]


def test_table_scenario_widths_ignore_escape_codes(stenciller: Stenciller) -> None:
    stenciller.add_table_stencil("t1", ["A", "B"], ["k1", "k2"], {"k2": "red"})
    rows = stenciller.apply_table_stencil("t1", [{"k1": "x", "k2": "y"}])
    assert rows == [["A", "B"], ["-", "-"], ["x", RED_Y]]


def test_table_column_order_drops_and_fills(stenciller: Stenciller) -> None:
    stenciller.add_table_stencil("t", [], ["key1", "key2"])
    assert stenciller.apply_table_stencil("t", [{"key1": "a", "key3": "b"}]) == [["a", ""]]


def test_table_missing_key_does_not_shift_columns(stenciller: Stenciller) -> None:
    stenciller.add_table_stencil("t", None, ["a", "b", "c"])
    rows = stenciller.apply_table_stencil("t", [{"a": "1", "c": "3"}, {"b": "2"}])
    assert rows == [["1", "", "3"], ["", "2", ""]]


def test_table_divider_matches_column_widths(stenciller: Stenciller) -> None:
    stenciller.add_table_stencil(
        "people",
        ["Name", "Age"],
        ["name", "age"],
        {"name": "blue", "age": "red"},
    )
    rows = stenciller.apply_table_stencil(
        "people",
        [{"name": "Grace Hopper", "age": "85"}, {"name": "Ada", "age": "36"}],
    )
    headers, divider, *body = rows
    assert len(divider) == len(headers)
    widths = column_widths([headers, *body])
    assert widths == [len("Grace Hopper"), len("Age")]
    assert [visible_length(cell) for cell in divider] == widths
    assert [strip_ansi(cell) for cell in body[0]] == ["Grace Hopper", "85"]


def test_table_without_headers_returns_data_only(stenciller: Stenciller) -> None:
    stenciller.add_table_stencil("t", (), ["a"])
    assert stenciller.apply_table_stencil("t", [{"a": "1"}, {"a": "2"}]) == [["1"], ["2"]]
    assert stenciller.apply_table_stencil("t", []) == []


def test_table_with_headers_and_no_rows(stenciller: Stenciller) -> None:
    stenciller.add_table_stencil("t", ["Head", "X"], ["a", "b"])
    assert stenciller.apply_table_stencil("t", []) == [["Head", "X"], ["----", "-"]]


def test_table_not_found(stenciller: Stenciller) -> None:
    stenciller.add_template_stencil("t", "{{a}}")
    with pytest.raises(StencilNotFoundError):
        stenciller.apply_table_stencil("t", [{"a": "1"}])


def test_custom_divider_char(registry, stub_colorizer) -> None:
    stenciller = Stenciller(registry, stub_colorizer, divider_char="=")
    stenciller.add_table_stencil("t", ["AB"], ["a"])
    assert stenciller.apply_table_stencil("t", [{"a": "x"}])[1] == ["=="]


def test_default_colorizer_logs_unknown_color(caplog: pytest.LogCaptureFixture) -> None:
    stenciller = Stenciller(colorizer=AnsiColorizer(capability="16"))
    stenciller.add_template_stencil("s", "{{v}}", {"v": "chartreuse"})
    with caplog.at_level(logging.INFO):
        assert stenciller.apply_template_stencil("s", {"v": "text"}) == "text"
    assert any("chartreuse" in record.getMessage() for record in caplog.records)


class _BlankingColorizer:
    """Colorizer that returns an empty string for colors it does not know."""

    def colorize(self, text: str, color_name: str):
        if color_name == "red":
            return f"\x1b[31m{text}\x1b[0m", True
        return "", False


def test_unknown_color_keeps_original_value(registry) -> None:
    stenciller = Stenciller(registry, _BlankingColorizer())
    stenciller.add_template_stencil("g", "Hi {{name}}", {"name": "chartreuse"})
    assert stenciller.apply_template_stencil("g", {"name": "Ada"}) == "Hi Ada"
    stenciller.add_table_stencil("t", None, ["a", "b"], {"a": "chartreuse", "b": "red"})
    assert stenciller.apply_table_stencil("t", [{"a": "x", "b": "y"}]) == [["x", RED_Y]]


def test_unknown_color_logged_once_per_name(
    stenciller: Stenciller, caplog: pytest.LogCaptureFixture
) -> None:
    stenciller.add_template_stencil("s", "{{a}}{{b}}", {"a": "chartreuse", "b": "chartreuse"})
    with caplog.at_level(logging.INFO, logger="stencil_printer.stenciller"):
        stenciller.apply_template_stencil("s", {"a": "1", "b": "2"})
        stenciller.apply_template_stencil("s", {"a": "3", "b": "4"})
    messages = [record for record in caplog.records if "chartreuse" in record.getMessage()]
    assert len(messages) == 1
    assert messages[0].levelno == logging.INFO


def test_short_headers_padded_to_column_order(stenciller: Stenciller) -> None:
    stenciller.add_table_stencil("t", ["A"], ["a", "b"])
    rows = stenciller.apply_table_stencil("t", [{"a": "x", "b": "yy"}])
    assert rows == [["A", ""], ["-", "--"], ["x", "yy"]]
    assert len({len(row) for row in rows}) == 1


def test_divider_respects_min_width(registry, stub_colorizer) -> None:
    stenciller = Stenciller(registry, stub_colorizer, min_width=3)
    stenciller.add_table_stencil("t", ["A", "Long"], ["a", "b"])
    assert stenciller.apply_table_stencil("t", [{"a": "x", "b": "y"}])[1] == ["---", "----"]
