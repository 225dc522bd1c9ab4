import json

import pytest

from ethica_core.enums import ItemKind
from ethica_core.models import EthicsItem, ItemText
from ingest_service.assemble.writer import load_corpus, serialize_corpus, summarize, write_corpus
from ingest_service.errors import CorpusBuildError, CorpusValidationError, MissingInputError


def make_items():
    return [
        EthicsItem(
            id="E1D1",
            ref="Part I, Definition 1",
            part=1,
            kind=ItemKind.definition,
            label="Definition 1",
            order=1,
            text=ItemText(original="Per causam sui intelligo", translation="By that which is self-caused"),
        ),
        EthicsItem(
            id="E2p1",
            ref="Part II, Proposition 1",
            part=2,
            kind=ItemKind.proposition,
            label="Proposition 1",
            order=1,
        ),
    ]


class TestWrite:
    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "data" / "nested" / "ethics.json"
        result = write_corpus(make_items(), target)
        assert target.is_file()
        assert result.count == 2
        assert [r["id"] for r in json.loads(target.read_text(encoding="utf-8"))] == ["E1D1", "E2p1"]

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "ethics.json"
        target.write_text("stale", encoding="utf-8")
        write_corpus(make_items()[:1], target)
        assert len(json.loads(target.read_text(encoding="utf-8"))) == 1
        assert not (tmp_path / "ethics.json.tmp").exists()

    def test_output_is_byte_identical_across_runs(self, tmp_path):
        first = write_corpus(make_items(), tmp_path / "a.json")
        second = write_corpus(make_items(), tmp_path / "b.json")
        assert (tmp_path / "a.json").read_bytes() == (tmp_path / "b.json").read_bytes()
        assert first.sha256 == second.sha256

    def test_non_ascii_kept_verbatim(self):
        items = make_items()
        items[0].text.translation = "∀x (C(x) ↔ E(x)), causæ"
        assert "∀x (C(x) ↔ E(x)), causæ" in serialize_corpus(items)

    def test_record_shape(self):
        record = json.loads(serialize_corpus(make_items()))[0]
        assert set(record) == {
            "id", "ref", "part", "kind", "label", "order", "text",
            "concepts", "logic", "dependencies", "proof", "meta",
        }
        assert record["proof"] == {"status": "none"}
        assert record["dependencies"] == {"uses": []}
        assert record["meta"]["status"] == "draft"


class TestLoad:
    def test_load_written_corpus(self, tmp_path):
        target = tmp_path / "ethics.json"
        write_corpus(make_items(), target)
        loaded = load_corpus(target)
        assert [item.id for item in loaded] == ["E1D1", "E2p1"]
        assert loaded[0].text.original == "Per causam sui intelligo"

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingInputError, match="ethica build"):
            load_corpus(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        target = tmp_path / "ethics.json"
        target.write_text("{not json", encoding="utf-8")
        with pytest.raises(CorpusBuildError, match="not valid JSON"):
            load_corpus(target)

    def test_not_an_array(self, tmp_path):
        target = tmp_path / "ethics.json"
        target.write_text("{}", encoding="utf-8")
        with pytest.raises(CorpusValidationError):
            load_corpus(target)

    def test_invalid_record(self, tmp_path):
        target = tmp_path / "ethics.json"
        target.write_text(json.dumps([{"id": "E1p1", "part": 9}]), encoding="utf-8")
        with pytest.raises(CorpusValidationError, match="invalid records"):
            load_corpus(target)


def test_summarize():
    summary = summarize(make_items())
    assert summary.total == 2
    assert summary.by_kind == {"definition": 1, "proposition": 1}
    assert summary.parts == [1, 2]
