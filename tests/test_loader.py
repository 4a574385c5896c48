"""Tests for the dataset loading boundary."""

import urllib.error

import pytest

from emotionmap.model import loader
from emotionmap.model.errors import FetchError, FieldError, ParseError, RangeError, ShapeError
from emotionmap.model.loader import (
    FALLBACK_GROUPS,
    FALLBACK_NOTICE,
    LoadOutcome,
    fetch_document,
    load_dataset,
    parse_document,
)


class TestParse:

    def test_valid_json(self):
        assert parse_document(b'[{"a": 1}]') == [{"a": 1}]

    def test_invalid_json(self):
        with pytest.raises(ParseError):
            parse_document(b"[{")

    @pytest.mark.parametrize("payload", [b"[NaN]", b"[Infinity]", b"[-Infinity]"])
    def test_non_finite_constants_rejected(self, payload):
        with pytest.raises(ParseError):
            parse_document(payload)

    def test_bad_encoding(self):
        with pytest.raises(ParseError):
            parse_document(b"\xff\xfe\x00garbage")

    def test_deeply_nested_document(self):
        with pytest.raises(ParseError):
            parse_document(b"[" * 100000 + b"]" * 100000)


class TestFetch:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FetchError) as info:
            fetch_document(str(tmp_path / "missing.json"))
        assert info.value.source.endswith("missing.json")

    def test_reads_file(self, data_file):
        assert fetch_document(str(data_file)).startswith(b"[")

    def test_http_error_status(self, monkeypatch):
        def fake_urlopen(req, timeout):
            raise urllib.error.HTTPError(req.full_url, 404, "Not Found", {}, None)

        monkeypatch.setattr(loader.urllib.request, "urlopen", fake_urlopen)
        with pytest.raises(FetchError) as info:
            fetch_document("http://example.invalid/data.json")
        assert info.value.status == 404
        assert "404" in str(info.value)

    def test_network_failure(self, monkeypatch):
        def fake_urlopen(req, timeout):
            raise urllib.error.URLError("unreachable")

        monkeypatch.setattr(loader.urllib.request, "urlopen", fake_urlopen)
        with pytest.raises(FetchError) as info:
            fetch_document("https://example.invalid/data.json")
        assert info.value.status is None


class TestLoadDataset:
    """End-to-end acquisition with fallback."""

    def test_success(self, data_file):
        outcome = load_dataset(str(data_file))
        assert not outcome.used_fallback
        assert len(outcome.groups) == 3
        assert outcome.messages() == []

    def test_missing_file_falls_back(self, tmp_path):
        outcome = load_dataset(str(tmp_path / "nope.json"))
        assert outcome.used_fallback
        assert outcome.groups == FALLBACK_GROUPS
        assert isinstance(outcome.error, FetchError)

    def test_bad_json_falls_back(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        outcome = load_dataset(str(path))
        assert isinstance(outcome.error, ParseError)

    def test_validation_failure_falls_back(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text('[{"category": "x"}]', encoding="utf-8")
        outcome = load_dataset(str(path))
        assert isinstance(outcome.error, FieldError)
        assert outcome.error.index == 0
        assert outcome.groups == FALLBACK_GROUPS

    def test_huge_coordinate_falls_back(self, tmp_path):
        path = tmp_path / "huge.json"
        path.write_text(
            '[{"category": "c", "level": "l", "words": [{"word": "w", "coord": [1' + "0" * 400 + ', 0]}]}]',
            encoding="utf-8",
        )
        outcome = load_dataset(str(path))
        assert outcome.used_fallback
        assert isinstance(outcome.error, RangeError)

    def test_deep_nesting_falls_back(self, tmp_path):
        path = tmp_path / "deep.json"
        path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
        outcome = load_dataset(str(path))
        assert outcome.used_fallback
        assert isinstance(outcome.error, ParseError)

    def test_empty_document_falls_back(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")
        assert isinstance(load_dataset(str(path)).error, ShapeError)

    def test_fallback_messages(self):
        outcome = LoadOutcome(groups=FALLBACK_GROUPS, source="x", error=FetchError("boom", source="x"))
        messages = outcome.messages()
        assert messages[0].startswith("数据加载失败: boom")
        assert messages[1] == FALLBACK_NOTICE

    def test_fallback_dataset_shape(self):
        words = [w.word for w in FALLBACK_GROUPS[0].words]
        assert words == ["示例词汇", "数据加载失败"]
        assert FALLBACK_GROUPS[0].category == "示例"
