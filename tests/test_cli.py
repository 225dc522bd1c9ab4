import json

from typer.testing import CliRunner

from ingest_service import cli
from ingest_service.cli import app
from ingest_service.errors import CorpusValidationError, WarningType

runner = CliRunner()


def build_args(english, latin, output, *extra):
    return ["build", "--english-path", str(english), "--latin-path", str(latin), "--output", str(output), *extra]


def test_build_writes_corpus(tmp_path, raw_files):
    english, latin = raw_files
    output = tmp_path / "out" / "ethics.json"
    result = runner.invoke(app, build_args(english, latin, output))
    assert result.exit_code == 0, result.output
    assert "Wrote 13 items" in result.output
    assert "SMALL_CORPUS" in result.output
    records = json.loads(output.read_text(encoding="utf-8"))
    assert records[0]["id"] == "E1D1"
    assert records[0]["concepts"] == []


def test_build_with_enrichment(tmp_path, raw_files):
    english, latin = raw_files
    output = tmp_path / "ethics.json"
    result = runner.invoke(app, build_args(english, latin, output, "--enrich"))
    assert result.exit_code == 0, result.output
    records = {r["id"]: r for r in json.loads(output.read_text(encoding="utf-8"))}
    assert records["E1p1"]["proof"]["status"] == "sketch"


def test_missing_inputs_exit_nonzero_without_output(tmp_path):
    output = tmp_path / "ethics.json"
    result = runner.invoke(app, build_args(tmp_path / "en.html", tmp_path / "la.html", output))
    assert result.exit_code == 1
    assert "Missing required raw HTML files" in result.output
    assert not output.exists()


def test_existing_output_untouched_on_failure(tmp_path):
    output = tmp_path / "ethics.json"
    output.write_text("[]\n", encoding="utf-8")
    result = runner.invoke(app, build_args(tmp_path / "en.html", tmp_path / "la.html", output))
    assert result.exit_code == 1
    assert output.read_text(encoding="utf-8") == "[]\n"


def test_inspect(tmp_path, raw_files):
    english, latin = raw_files
    output = tmp_path / "ethics.json"
    runner.invoke(app, build_args(english, latin, output))

    result = runner.invoke(app, ["inspect", "E1p3c1", "--corpus", str(output)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["ref"] == "Part I, Proposition 3, Corollary 1"

    missing = runner.invoke(app, ["inspect", "E5p99", "--corpus", str(output)])
    assert missing.exit_code == 1


def test_enrich_in_place(tmp_path, raw_files):
    english, latin = raw_files
    output = tmp_path / "ethics.json"
    runner.invoke(app, build_args(english, latin, output))

    result = runner.invoke(app, ["enrich", "--corpus", str(output)])
    assert result.exit_code == 0, result.output
    records = {r["id"]: r for r in json.loads(output.read_text(encoding="utf-8"))}
    assert records["E1D1"]["concepts"] == ["Causa sui", "Essence", "Existence"]


def test_unparseable_source_leaves_existing_output(tmp_path, raw_files):
    english, _ = raw_files
    latin = tmp_path / "empty-latin.html"
    latin.write_bytes(b"")
    output = tmp_path / "ethics.json"
    output.write_text("[]\n", encoding="utf-8")

    result = runner.invoke(app, build_args(english, latin, output))
    assert result.exit_code == 1
    assert "no document body" in result.output
    assert output.read_text(encoding="utf-8") == "[]\n"


def test_validation_failure_leaves_existing_output(tmp_path, raw_files, monkeypatch):
    english, latin = raw_files
    output = tmp_path / "ethics.json"
    output.write_text("[]\n", encoding="utf-8")

    def reject(items, *, min_size, report):
        raise CorpusValidationError("Corpus validation failed:\n  - Duplicate id in corpus: E1p1")

    monkeypatch.setattr(cli, "validate_corpus", reject)
    result = runner.invoke(app, build_args(english, latin, output))
    assert result.exit_code == 1
    assert "Duplicate id in corpus: E1p1" in result.output
    assert "LATIN_MISSING" in result.output
    assert output.read_text(encoding="utf-8") == "[]\n"


def test_enrich_failure_prints_collected_warnings(tmp_path, raw_files, monkeypatch):
    english, latin = raw_files
    output = tmp_path / "ethics.json"
    runner.invoke(app, build_args(english, latin, output))
    before = output.read_bytes()

    def reject(items, *, min_size, report):
        report.warn(WarningType.SMALL_CORPUS, "Corpus only has 13 items")
        raise CorpusValidationError("Corpus validation failed")

    monkeypatch.setattr(cli, "validate_corpus", reject)
    result = runner.invoke(app, ["enrich", "--corpus", str(output)])
    assert result.exit_code == 1
    assert "SMALL_CORPUS" in result.output
    assert "Corpus validation failed" in result.output
    assert output.read_bytes() == before
