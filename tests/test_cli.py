"""Tests for the command line interface."""
import json

from cli import EXIT_DIFFERENT, EXIT_ERROR, EXIT_IDENTICAL, main


def test_compare_prints_summary(config_pair, capsys):
    source, target = config_pair

    code = main(["compare", str(source), str(target)])

    out = capsys.readouterr().out
    assert code == EXIT_DIFFERENT
    assert "Source: uat.yaml (yaml)" in out
    assert "🔴 Missing in Target: 1" in out


def test_compare_identical(tmp_path, capsys):
    source = tmp_path / "a.json"
    target = tmp_path / "b.yaml"
    source.write_text('{"a": {"b": 1}}', encoding="utf-8")
    target.write_text("a:\n  b: 1\n", encoding="utf-8")

    assert main(["compare", str(source), str(target)]) == EXIT_IDENTICAL


def test_compare_json_output(config_pair, capsys):
    source, target = config_pair

    main(["compare", str(source), str(target), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert data["only_in_source"] == ["database.debug"]


def test_compare_report_output(config_pair, capsys):
    source, target = config_pair

    main(["compare", str(source), str(target), "--report"])

    assert "  - database.debug" in capsys.readouterr().out


def test_compare_missing_file(tmp_path, capsys):
    code = main(["compare", str(tmp_path / "a.json"), str(tmp_path / "b.json")])

    assert code == EXIT_ERROR
    assert "Error:" in capsys.readouterr().err


def test_detect(config_pair, capsys):
    source, _ = config_pair

    assert main(["detect", str(source)]) == 0
    assert capsys.readouterr().out.strip() == "yaml (from content)"


def test_flatten(config_pair, capsys):
    source, _ = config_pair

    assert main(["flatten", str(source)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        'database.host = "uat-db"',
        "database.port = 5432",
        "database.debug = true",
    ]


def test_suggest(config_pair, capsys):
    source, _ = config_pair

    assert main(["suggest", str(source)]) == 0
    out = capsys.readouterr().out
    assert "prod.json" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "compare" in capsys.readouterr().out
