#!/usr/bin/env python3
"""
Tests for the renderer factory, report widget and diagnostics loader.
"""

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from message_renderer import (
    CompilerDiagnostic,
    CompilerMessageSeverity,
    CompilerMessageSourceLocation,
    DiagnosticsLoadError,
    MessageReportWidget,
    OutputFormat,
    RendererFactory,
    XmlMessageRenderer,
    load_diagnostics,
    parse_diagnostics,
    render_diagnostics,
    xml_message_renderer,
)


@pytest.fixture
def diagnostics():
    """Fixture with a mix of severities."""
    return [
        CompilerDiagnostic(
            CompilerMessageSeverity.ERROR,
            "Unresolved reference: <foo>",
            CompilerMessageSourceLocation("src/a.kt", 3, 5),
        ),
        CompilerDiagnostic(CompilerMessageSeverity.WARNING, "Parameter 'x' is never used"),
        CompilerDiagnostic(CompilerMessageSeverity.STRONG_WARNING, "Deprecated flag"),
        CompilerDiagnostic(CompilerMessageSeverity.INFO, "done"),
    ]


@pytest.fixture
def diagnostics_file(tmp_path: Path) -> Path:
    """Create a JSON diagnostics file."""
    path = tmp_path / "diagnostics.json"
    path.write_text(
        json.dumps(
            {
                "messages": [
                    {
                        "severity": "error",
                        "message": "a & b",
                        "location": {"path": "a.kt", "line": 1, "column": 2},
                    },
                    {"severity": "WARNING", "message": "w"},
                    {"severity": "info", "location": {"path": "b.kt"}},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


# --- RendererFactory ---


@pytest.mark.parametrize("name", ["XML", "xml", " Xml ", OutputFormat.XML])
def test_factory_create_xml(name):
    """Test the XML renderer is found case-insensitively."""
    assert RendererFactory.create_renderer(name) is xml_message_renderer


def test_factory_unknown_format():
    """Test unknown formats are rejected."""
    with pytest.raises(ValueError, match="Unsupported output format: gradle"):
        RendererFactory.create_renderer("gradle")


def test_factory_available_renderers():
    """Test the registered names."""
    assert "XML" in RendererFactory.available_renderers()


def test_factory_register(monkeypatch):
    """Test registering a renderer makes it selectable by name."""
    monkeypatch.setattr(RendererFactory, "_renderers", dict(RendererFactory._renderers))

    class Tagged(XmlMessageRenderer):
        @property
        def name(self) -> str:
            return "tagged"

    tagged = Tagged()
    RendererFactory.register(tagged)

    assert RendererFactory.create_renderer("TAGGED") is tagged
    assert RendererFactory.available_renderers() == ["TAGGED", "XML"]


# --- MessageReportWidget ---


def test_render_report(diagnostics):
    """Test a report contains one element per diagnostic in order."""
    document = MessageReportWidget().render_report(diagnostics)

    assert document.startswith("<MESSAGES>")
    assert document.endswith("</MESSAGES>")
    root = ET.fromstring(document)
    assert [e.tag for e in root] == ["ERROR", "WARNING", "STRONG_WARNING", "INFO"]
    assert root[0].text == "Unresolved reference: <foo>"
    assert root[0].attrib == {"path": "src/a.kt", "line": "3", "column": "5"}


def test_render_report_with_usage(diagnostics):
    """Test usage text is appended after the diagnostics."""
    widget = MessageReportWidget(xml_message_renderer)
    document = widget.render_report(diagnostics[:1], usage="usage: foo")

    expected = (
        "<MESSAGES>"
        + xml_message_renderer.render(
            diagnostics[0].severity, diagnostics[0].message, diagnostics[0].location
        )
        + xml_message_renderer.render_usage("usage: foo")
        + "</MESSAGES>"
    )
    assert document == expected


def test_render_report_empty():
    """Test an empty report is an empty root."""
    assert MessageReportWidget().render_report([]) == "<MESSAGES></MESSAGES>"


def test_write_report(tmp_path, diagnostics):
    """Test the report is written as UTF-8, creating directories."""
    output = tmp_path / "nested" / "out.xml"
    result = MessageReportWidget().write_report(diagnostics, output)

    assert result == output
    assert output.read_text(encoding="utf-8") == MessageReportWidget().render_report(diagnostics)


def test_summary(diagnostics):
    """Test counts per severity and totals."""
    stats = MessageReportWidget.summary(diagnostics)

    assert stats["ERROR"] == 1
    assert stats["WARNING"] == 1
    assert stats["STRONG_WARNING"] == 1
    assert stats["INFO"] == 1
    assert stats["LOGGING"] == 0
    assert stats["errors"] == 1
    assert stats["warnings"] == 2
    assert stats["total"] == 4


# --- Loader ---


def test_load_diagnostics(diagnostics_file):
    """Test diagnostics are converted in file order."""
    loaded = load_diagnostics(diagnostics_file)

    assert loaded == [
        CompilerDiagnostic(
            CompilerMessageSeverity.ERROR, "a & b", CompilerMessageSourceLocation("a.kt", 1, 2)
        ),
        CompilerDiagnostic(CompilerMessageSeverity.WARNING, "w"),
        CompilerDiagnostic(CompilerMessageSeverity.INFO, "", CompilerMessageSourceLocation("b.kt")),
    ]


def test_parse_diagnostics_accepts_list():
    """Test a bare list is accepted."""
    loaded = parse_diagnostics([{"severity": "output", "message": "x"}])
    assert loaded == [CompilerDiagnostic(CompilerMessageSeverity.OUTPUT, "x")]


@pytest.mark.parametrize(
    "data",
    [
        [{"severity": "fatal", "message": "x"}],
        [{"message": "no severity"}],
        [{"severity": "error", "location": {"line": 1}}],
        {"messages": "not a list"},
        "just a string",
    ],
)
def test_parse_diagnostics_invalid(data):
    """Test invalid data raises a load error."""
    with pytest.raises(DiagnosticsLoadError) as excinfo:
        parse_diagnostics(data)

    assert "Invalid diagnostics" in str(excinfo.value)
    assert excinfo.value.error_code == "DIAGNOSTICS_LOAD"


def test_load_diagnostics_missing_file(tmp_path):
    """Test a missing file raises a load error."""
    missing = tmp_path / "missing.json"
    with pytest.raises(DiagnosticsLoadError, match="File not found") as excinfo:
        load_diagnostics(missing)

    assert excinfo.value.path == str(missing)


def test_load_diagnostics_invalid_json(tmp_path):
    """Test malformed JSON raises a load error."""
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DiagnosticsLoadError, match="Invalid JSON"):
        load_diagnostics(path)


def test_render_diagnostics():
    """Test rendering plain dictionaries in one call."""
    document = render_diagnostics(
        [{"severity": "error", "message": "oops"}], usage="usage: foo"
    )
    assert document == (
        "<MESSAGES><ERROR>oops</ERROR>\n"
        "<STRONG_WARNING>usage: foo</STRONG_WARNING>\n</MESSAGES>"
    )


def test_load_diagnostics_not_utf8(tmp_path):
    """Test bytes that are not UTF-8 raise a load error."""
    path = tmp_path / "latin.json"
    path.write_bytes(b'[{"severity": "error", "message": "\xff\xfe"}]')

    with pytest.raises(DiagnosticsLoadError, match="Cannot decode") as excinfo:
        load_diagnostics(path)

    assert excinfo.value.path == str(path)
    assert excinfo.value.error_code == "DIAGNOSTICS_LOAD"
