"""Unit tests for pricetag.dataset and the bundled data."""
from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from pricetag.data import DEFAULT_DATA
from pricetag.dataset import load_dataset, parse_dataset
from pricetag.errors import DatasetError
from pricetag.types import Dataset, Defaults

RAW = {
    "defaults": {
        "format": "%s%v",
        "decimal": ".",
        "thousand": ",",
        "noSymbolFormat": "%v %s",
    },
    "locales": {"f": {"%v %s": ["fr"]}, "d": {",": ["fr"]}},
    "currencies": {"s": {"€": ["EUR"]}},
}


# --- parse_dataset ---


class TestParseDataset:
    def test_parses_tables(self):
        dataset = parse_dataset(RAW)
        assert dataset.defaults == Defaults(
            format="%s%v", decimal=".", thousand=",", no_symbol_format="%v %s"
        )
        assert dataset.locales.f == {"%v %s": ("fr",)}
        assert dataset.locales.d == {",": ("fr",)}
        assert dataset.currencies.s == {"€": ("EUR",)}

    def test_missing_subtables_are_empty(self):
        dataset = parse_dataset({"defaults": RAW["defaults"]})
        assert dataset.locales.t == {}
        assert dataset.currencies.s == {}

    def test_preserves_key_order(self):
        raw = dict(RAW, currencies={"s": {"b": ["X"], "a": ["Y"]}})
        assert list(parse_dataset(raw).currencies.s) == ["b", "a"]

    def test_missing_defaults(self):
        with pytest.raises(DatasetError, match="defaults") as exc_info:
            parse_dataset({"locales": {}})
        assert exc_info.value.code == "INVALID_DATASET"

    def test_incomplete_defaults(self):
        with pytest.raises(DatasetError, match="noSymbolFormat"):
            parse_dataset({"defaults": {"format": "%s%v", "decimal": ".", "thousand": ","}})

    def test_codes_must_be_a_list(self):
        raw = dict(RAW, currencies={"s": {"€": "EUR"}})
        with pytest.raises(DatasetError, match="currencies.s"):
            parse_dataset(raw)

    def test_not_a_mapping(self):
        with pytest.raises(DatasetError):
            parse_dataset(["defaults"])


# --- load_dataset ---


class TestLoadDataset:
    def test_from_mapping(self):
        assert load_dataset(RAW) == parse_dataset(RAW)

    def test_dataset_passthrough(self):
        dataset = parse_dataset(RAW)
        assert load_dataset(dataset) is dataset

    def test_from_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps(RAW), encoding="utf-8")
        assert load_dataset(path) == parse_dataset(RAW)
        assert load_dataset(str(path)) == parse_dataset(RAW)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="Cannot read"):
            load_dataset(tmp_path / "missing.json")

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DatasetError, match="not valid JSON"):
            load_dataset(path)

    def test_from_url(self):
        resp = MagicMock(status_code=200)
        resp.json.return_value = RAW
        with patch("pricetag.dataset.requests.get", return_value=resp) as get:
            dataset = load_dataset("https://cdn.example.com/pricetag.json", timeout=3)
        get.assert_called_once_with("https://cdn.example.com/pricetag.json", timeout=3)
        assert dataset == parse_dataset(RAW)

    def test_url_http_error(self):
        with patch("pricetag.dataset.requests.get", return_value=MagicMock(status_code=404)):
            with pytest.raises(DatasetError, match="HTTP 404"):
                load_dataset("https://cdn.example.com/missing.json")

    def test_url_connection_error(self):
        with patch(
            "pricetag.dataset.requests.get",
            side_effect=requests.ConnectionError("refused"),
        ):
            with pytest.raises(DatasetError, match="Cannot fetch"):
                load_dataset("http://localhost:1/data.json")

    def test_url_invalid_json(self):
        resp = MagicMock(status_code=200)
        resp.json.side_effect = ValueError("Expecting value")
        with patch("pricetag.dataset.requests.get", return_value=resp):
            with pytest.raises(DatasetError, match="not valid JSON"):
                load_dataset("https://cdn.example.com/broken.json")


# --- bundled data ---


def test_bundled_data_parses():
    dataset = parse_dataset(DEFAULT_DATA)
    assert isinstance(dataset, Dataset)
    assert dataset.defaults.no_symbol_format == "%v %s"


def test_bundled_data_has_no_duplicate_codes():
    dataset = parse_dataset(DEFAULT_DATA)
    tables = (
        dataset.locales.f,
        dataset.locales.d,
        dataset.locales.t,
        dataset.currencies.s,
    )
    for table in tables:
        codes = [code for values in table.values() for code in values]
        assert len(codes) == len(set(codes))
