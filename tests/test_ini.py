"""Tests for ini persistence."""

import logging

import pytest

from cliparams import Kind, declare_param, dump_ini, load_ini, parse_ini, save_ini


@pytest.fixture
def declare(registry, binder):
    def _declare(section, key, kind=Kind.STRING):
        return declare_param(registry, binder, section, key, kind)
    return _declare


class TestDumpIni:
    """Tests for dump_ini."""

    def test_empty_registry(self, registry):
        assert dump_ini(registry) == ""

    def test_format(self, declare, registry):
        declare("A", "x", Kind.INTEGER).set(1)
        declare("A", "name").set("hello world")
        declare("B", "v", Kind.DOUBLE_VECTOR).set([0.5, 2])
        assert dump_ini(registry) == (
            "[A]\n"
            "\n"
            "x = 1\n"
            "name = hello world\n"
            "\n"
            "[B]\n"
            "\n"
            "v = 0.5,2.0\n"
            "\n"
        )

    def test_demo_app(self, demo_app):
        text = demo_app.to_ini()
        assert "[Basic Types]\n\nBool Param = true\n" in text
        assert "Double Enum = 0.3\n" in text
        assert "Double Vec = 1.0,2.0,3.0,4.0\n" in text
        assert "[Special]\n\nFile = \nSlider = 0.333\n" in text


class TestParseIni:
    """Tests for parse_ini."""

    def test_assigns_declared_values(self, declare):
        count = declare("Filter", "Count", Kind.INTEGER)
        sigma = declare("Filter", "Sigma", Kind.DOUBLE)
        assigned = parse_ini("[Filter]\nCount = 4\nSigma=1.25\n", count.registry)
        assert assigned == 2
        assert count.value == 4
        assert sigma.value == 1.25

    def test_comments_and_short_lines_skipped(self, declare, registry):
        handle = declare("S", "K", Kind.INTEGER).set(1)
        text = "# K = 5\n\n;\n[S]\nK = 2\n"
        assert parse_ini(text, registry) == 1
        assert handle.value == 2

    def test_default_section(self, registry, caplog):
        """Keys before any section header belong to "Global"."""
        with caplog.at_level(logging.WARNING):
            parse_ini("steps = 12\n", registry)
        assert registry.get("Global", "steps").text == "12"

    def test_undeclared_key_is_stored_as_string(self, registry, caplog):
        with caplog.at_level(logging.WARNING):
            parse_ini("[New]\nkey = some value\n", registry)
        record = registry.get("New", "key")
        assert record.kind is Kind.STRING
        assert record.value == "some value"
        assert "Undeclared parameter New/key" in caplog.text

    def test_later_declaration_decodes_text(self, declare, registry):
        parse_ini("[S]\nvalues = 1,2,3\n", registry)
        handle = declare("S", "values", Kind.INTEGER_VECTOR)
        assert handle.value == [1, 2, 3]

    def test_value_split_on_first_equals(self, declare, registry):
        handle = declare("S", "expr")
        parse_ini("[S]\nexpr = a=b\n", registry)
        assert handle.value == "a=b"

    def test_line_without_equals(self, declare, registry, caplog):
        handle = declare("S", "K", Kind.INTEGER).set(1)
        with caplog.at_level(logging.WARNING):
            assert parse_ini("[S]\nno value here\n", registry) == 0
        assert handle.value == 1
        assert "without '='" in caplog.text

    def test_lenient_numbers(self, declare, registry):
        handle = declare("S", "K", Kind.INTEGER)
        parse_ini("[S]\nK = 42abc\n", registry)
        assert handle.value == 42


class TestIniFiles:
    """Tests for save_ini and load_ini."""

    def test_save_then_load(self, demo_app, tmp_path):
        path = tmp_path / "demo.ini"
        demo_app.save(path)

        demo_app.param("Special", "Slider", Kind.DOUBLE).set(0.9)
        demo_app.param("Basic Types", "Bool Param", Kind.BOOLEAN).set(False)
        assert demo_app.load(path) is True

        assert demo_app.param("Special", "Slider", Kind.DOUBLE).value == 0.333
        assert demo_app.param("Basic Types", "Bool Param", Kind.BOOLEAN).value is True

    def test_load_missing_file(self, declare, registry, tmp_path):
        handle = declare("S", "K", Kind.INTEGER).set(5)
        assert load_ini(tmp_path / "missing.ini", registry) is False
        assert handle.value == 5

    def test_save_to_missing_directory(self, registry, tmp_path):
        with pytest.raises(OSError):
            save_ini(tmp_path / "missing" / "values.ini", registry)


class TestRepresentability:
    """Tests for values the ini text cannot hold exactly."""

    @pytest.mark.parametrize("kind, value", [
        (Kind.STRING, "  padded  "),
        (Kind.STRING, "two\nlines"),
        (Kind.STRING_VECTOR, [""]),
        (Kind.STRING_VECTOR, ["a,b"]),
    ])
    def test_lossy_values_warn(self, declare, registry, caplog, kind, value):
        declare("S", "K", kind).set(value)
        with caplog.at_level(logging.WARNING):
            text = dump_ini(registry)
        assert text.startswith("[S]\n\nK = ")
        assert "Value of S/K cannot be stored exactly in ini text" in caplog.text

    def test_trimmed_on_read(self, declare, registry, caplog):
        """Surrounding blanks of a string value do not survive a round trip."""
        handle = declare("S", "K").set("  padded  ")
        with caplog.at_level(logging.WARNING):
            text = dump_ini(registry)
        parse_ini(text, registry)
        assert handle.value == "padded"

    def test_regular_values_do_not_warn(self, demo_app, caplog):
        with caplog.at_level(logging.WARNING):
            demo_app.to_ini()
        assert caplog.text == ""
