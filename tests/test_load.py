from pathlib import Path

import pytest

from graphtlp import ParseMode, TlpSyntaxError, load_document
from graphtlp.diagnostics import Diagnostic
from tests._shared_cases import case_source


def _write(tmp_path: Path, name: str, text: str, *, bom: bool = False) -> Path:
    path = tmp_path / name
    data = text.encode("utf-8")
    if bom:
        data = b"\xef\xbb\xbf" + data
    path.write_bytes(data)
    return path


def test_load_document_reads_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "graph.tlp", case_source("clusters_properties_and_attributes"))

    result = load_document(path)

    assert result.document.node_count == 4
    assert result.source_path == str(path).replace("\\", "/")
    assert result.diagnostics == ()


def test_load_document_strips_utf8_bom(tmp_path: Path) -> None:
    path = _write(tmp_path, "bom.tlp", case_source("minimal_document"), bom=True)

    result = load_document(path)

    assert result.document.version == "2.0"
    assert not result.source_text.startswith("\ufeff")


def test_load_document_accepts_string_paths(tmp_path: Path) -> None:
    path = _write(tmp_path, "named.tlp", '(tlp "2.0" (author "Jåhkåmåhkke") (nodes 0))')

    result = load_document(str(path))

    assert result.document.author == "Jåhkåmåhkke"


def test_load_document_forwards_mode_and_sink(tmp_path: Path) -> None:
    path = _write(tmp_path, "counts.tlp", case_source("declared_node_count_mismatch"))
    sink: list[Diagnostic] = []

    result = load_document(path, mode=ParseMode.STRICT, on_diagnostic=sink.append)

    assert result.options.mode is ParseMode.STRICT
    assert [diagnostic.code for diagnostic in sink] == ["TLP_NODE_COUNT_MISMATCH"]


def test_load_document_propagates_syntax_errors(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.tlp", case_source("unclosed_document"))

    with pytest.raises(TlpSyntaxError):
        load_document(path, mode=ParseMode.STRICT)


def test_load_document_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "absent.tlp")
