import json

import pytest

from roster_extractor.exceptions import DataPersistenceError
from roster_extractor.models import Committee, ExtractedDocument, Voter
from roster_extractor.persistence import JSONStore

DOCUMENT = ExtractedDocument(committees=(
    Committee(
        name="مدرسة النصر الإعدادية",
        sub_number="003",
        location="مدرسة النصر",
        voters=(Voter("1", "محمد احمد علي"),),
    ),
))


def test_save_writes_utf8_json(tmp_path):
    path = JSONStore(tmp_path / "out").save_document(DOCUMENT, "roster")

    assert path == tmp_path / "out" / "roster.json"
    raw = path.read_text(encoding="utf-8")
    assert "مدرسة النصر الإعدادية" in raw
    assert json.loads(raw)["totalVoters"] == 1


def test_load_returns_saved_document(tmp_path):
    store = JSONStore(tmp_path)
    path = store.save_document(DOCUMENT, "roster")

    assert store.load_document(path) == DOCUMENT


def test_load_missing_file(tmp_path):
    with pytest.raises(DataPersistenceError) as exc_info:
        JSONStore(tmp_path).load_document(tmp_path / "missing.json")
    assert exc_info.value.details["operation"] == "load"


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DataPersistenceError):
        JSONStore(tmp_path).load_document(path)


def test_load_rejects_document_breaking_invariants(tmp_path):
    data = DOCUMENT.to_dict()
    data["committees"][0]["voters"] = []
    path = tmp_path / "empty.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    with pytest.raises(DataPersistenceError) as exc_info:
        JSONStore(tmp_path).load_document(path)
    assert exc_info.value.details["operation"] == "load"
