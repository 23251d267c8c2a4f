import pytest

from docsearch.config import (
    ArgumentError,
    HelpRequested,
    ProgramConfig,
    parse_arguments,
    usage_text,
)


def test_defaults():
    config = parse_arguments([])
    assert config == ProgramConfig()
    assert config.limit == -1
    assert config.max_distance == 2
    assert config.output_format == "text"
    assert config.process_docs is True
    assert config.corpus_path is None


def test_short_options_with_values_and_flags():
    config = parse_arguments(["-i", "corpus", "-p", "algoritmo", "-r", "-s"])
    assert config.corpus_path == "corpus"
    assert config.search_pattern == "algoritmo"
    assert config.recursive is True
    assert config.show_stats is True


def test_long_options_with_equals_and_separate_value():
    config = parse_arguments(["--input=corpus", "--output", "out.txt"])
    assert config.corpus_path == "corpus"
    assert config.output_file == "out.txt"


def test_attached_short_value():
    assert parse_arguments(["-icorpus"]).corpus_path == "corpus"


def test_clustered_flags():
    config = parse_arguments(["-rts"])
    assert config.recursive and config.txt_only and config.show_stats


def test_h_means_html_only():
    config = parse_arguments(["-h"])
    assert config.html_only is True


@pytest.mark.parametrize(
    "fmt, csv, json",
    [("csv", True, False), ("json", False, True), ("text", False, False)],
)
def test_format_sets_export_flags(fmt, csv, json):
    config = parse_arguments(["-f", fmt])
    assert config.output_format == fmt
    assert config.export_csv is csv
    assert config.export_json is json


@pytest.mark.parametrize("raw, expected", [("5", 5), ("12x", 12), ("abc", 0)])
def test_limit_parses_leading_integer(raw, expected):
    assert parse_arguments(["-l", raw]).limit == expected


def test_max_distance_index_file_and_approximate():
    config = parse_arguments(
        ["--max-distance", "3", "--index-file", "corpus.idx", "--approximate"]
    )
    assert config.max_distance == 3
    assert config.index_file == "corpus.idx"
    assert config.approximate_search is True


def test_ignored_options_still_consume_arguments():
    config = parse_arguments(["-a", "kmp", "--top-words", "5", "--trie", "-r"])
    assert config.recursive is True
    assert config.corpus_path is None
    assert config.limit == -1


def test_non_options_are_skipped():
    config = parse_arguments(["extra", "-r", "more"])
    assert config.recursive is True


def test_double_dash_stops_option_processing():
    config = parse_arguments(["--", "-r"])
    assert config.recursive is False


def test_unambiguous_prefix_is_accepted():
    assert parse_arguments(["--inp", "corpus"]).corpus_path == "corpus"


def test_ambiguous_prefix_is_rejected():
    with pytest.raises(ArgumentError):
        parse_arguments(["--h"])


def test_help_raises():
    with pytest.raises(HelpRequested):
        parse_arguments(["--help"])


def test_help_wins_over_later_errors():
    with pytest.raises(HelpRequested):
        parse_arguments(["--help", "--bogus"])


def test_error_before_help_wins():
    with pytest.raises(ArgumentError):
        parse_arguments(["--bogus", "--help"])


@pytest.mark.parametrize(
    "argv",
    [["--bogus"], ["-x"], ["-i"], ["--input"], ["--recursive=yes"], ["-rx"]],
)
def test_bad_arguments_raise(argv):
    with pytest.raises(ArgumentError):
        parse_arguments(argv)


def test_usage_text_mentions_program_and_sections():
    text = usage_text("docsearch")
    assert "Uso: docsearch [COMANDO] [OPCIONES]" in text
    assert "  docsearch load -i corpus/ -r -s" in text
    assert "COMANDOS:" in text
    assert "FORMATOS DE SALIDA:" in text
    assert text.endswith("\n\n")