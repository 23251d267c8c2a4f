import csv
import json

import pytest

from docsearch.command_load import command_load
from docsearch.config import ProgramConfig


@pytest.fixture
def corpus(tmp_path):
    directory = tmp_path / "corpus"
    directory.mkdir()
    (directory / "a.txt").write_text("hello world", encoding="utf-8")
    (directory / "b.html").write_text("<p>hola</p>", encoding="utf-8")
    (directory / "c.csv").write_text("x,y\n1,2\n", encoding="utf-8")
    (directory / "d.bin").write_text("ignored", encoding="utf-8")
    return directory


def test_missing_corpus_path_fails(capsys):
    assert command_load(ProgramConfig()) == 1
    assert "Debe especificar un directorio" in capsys.readouterr().out


def test_nonexistent_directory_fails(tmp_path):
    config = ProgramConfig(corpus_path=str(tmp_path / "missing"))
    assert command_load(config) == 1


def test_load_reports_count(corpus, capsys):
    assert command_load(ProgramConfig(corpus_path=str(corpus))) == 0
    assert "Documentos cargados: 3" in capsys.readouterr().out


def test_csv_export(corpus, tmp_path):
    out = tmp_path / "out.csv"
    config = ProgramConfig(
        corpus_path=str(corpus), output_file=str(out), export_csv=True
    )
    assert command_load(config) == 0
    rows = list(csv.reader(out.read_text(encoding="utf-8").splitlines()))
    assert rows[0] == ["filename", "type", "size", "words_estimated"]
    by_name = {row[0]: row for row in rows[1:]}
    assert set(by_name) == {"a.txt", "b.html", "c.csv"}
    assert by_name["a.txt"][1] == "TXT"
    assert by_name["b.html"][1] == "HTML"
    assert by_name["c.csv"][1] == "OTHER"
    assert by_name["a.txt"][2] == str(len("hello world"))


def test_json_export_with_limit(corpus, tmp_path):
    out = tmp_path / "out.json"
    config = ProgramConfig(
        corpus_path=str(corpus), output_file=str(out), export_json=True, limit=2
    )
    assert command_load(config) == 0
    data = json.loads(out.read_text(encoding="utf-8"))["collection"]
    assert data["total_documents"] == 2
    assert [d["filename"] for d in data["documents"]] == ["a.txt", "b.html"]


def test_text_export(corpus, tmp_path):
    out = tmp_path / "out.txt"
    config = ProgramConfig(corpus_path=str(corpus), output_file=str(out), txt_only=True)
    assert command_load(config) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "REPORTE DE CARGA DE DOCUMENTOS"
    assert f"Directorio: {corpus}" in lines
    assert lines[-1] == f"a.txt\t{len('hello world')}\tTXT"


def test_html_only_filter(corpus, tmp_path):
    out = tmp_path / "out.json"
    config = ProgramConfig(
        corpus_path=str(corpus), output_file=str(out), export_json=True, html_only=True
    )
    command_load(config)
    data = json.loads(out.read_text(encoding="utf-8"))["collection"]
    assert [d["type"] for d in data["documents"]] == ["HTML"]


def test_unwritable_output_still_succeeds(corpus, tmp_path, capsys):
    config = ProgramConfig(
        corpus_path=str(corpus), output_file=str(tmp_path / "no" / "out.txt")
    )
    assert command_load(config) == 0
    assert "No se pudo crear el archivo de salida" in capsys.readouterr().out


def test_show_stats_prints_samples(corpus, capsys):
    config = ProgramConfig(corpus_path=str(corpus), show_stats=True)
    assert command_load(config) == 0
    output = capsys.readouterr().out
    assert "=== MUESTRA DE DOCUMENTOS ===" in output
    assert 'Vista previa: "hello world"' in output
    assert "Archivo: b.html" in output