"""
Tests for loading analyses, actor listings and quarterly series from disk.

Run with: pytest tests/test_loader.py -v
"""

import json

import pytest

from place_analysis.config import DEFAULT_ANALYSIS_ID, DEFAULT_QUARTERLY_SERIES
from place_analysis.data import loader
from place_analysis.data.quarterly import build_trend

from conftest import write_json
from test_types import ANALYSIS


class TestDataDir:
    def test_missing_directory_is_reported(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PLACE_DATA_DIR", str(tmp_path / "nope"))
        with pytest.raises(RuntimeError, match="PLACE_DATA_DIR"):
            loader.data_dir()


class TestLoadAnalysis:
    def test_loads_document(self, data_root):
        write_json(data_root / "analyses" / "2025-01-januar.json", ANALYSIS)
        analysis = loader.load_analysis("2025-01-januar")
        assert analysis is not None
        assert analysis.title == "Januar 2025"

    def test_missing_analysis_returns_none(self, data_root):
        assert loader.load_analysis("finnes-ikke") is None

    def test_malformed_json_fails(self, data_root):
        (data_root / "analyses" / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            loader.load_analysis("broken")

    def test_list_analyses_sorted(self, data_root):
        write_json(data_root / "analyses" / "b.json", ANALYSIS)
        write_json(data_root / "analyses" / "a.json", ANALYSIS)
        assert loader.list_analyses() == ["a", "b"]


class TestLoadQuarterlySeries:
    def test_missing_series_raises(self, data_root):
        with pytest.raises(FileNotFoundError):
            loader.load_quarterly_series("mangler")

    def test_loads_points(self, data_root):
        write_json(
            data_root / "quarterly" / "serie.json",
            {
                "metadata": {"title": "Serie", "currency": "NOK"},
                "data": [
                    {"year": 2024, "quarter": 1, "quarterLabel": "2024 Q1", "amount": 5},
                    {"year": 2024, "quarter": 2, "quarterLabel": "2024 Q2", "amount": 0},
                ],
            },
        )
        series = loader.load_quarterly_series("serie")
        assert [p.amount for p in series.data] == [5.0, 0.0]


class TestFindQuarterlySeries:
    """Quarterly data problems are logged instead of stopping the app."""

    def test_missing_series_returns_none(self, data_root):
        assert loader.find_quarterly_series("mangler") is None

    def test_malformed_json_returns_none(self, data_root):
        (data_root / "quarterly" / "broken.json").write_text("{", encoding="utf-8")
        assert loader.find_quarterly_series("broken") is None

    def test_invalid_quarter_returns_none(self, data_root):
        write_json(
            data_root / "quarterly" / "q5.json",
            {"metadata": {}, "data": [{"year": 2024, "quarter": 5, "amount": 1}]},
        )
        assert loader.find_quarterly_series("q5") is None

    def test_valid_series(self, data_root):
        write_json(
            data_root / "quarterly" / "ok.json",
            {"metadata": {}, "data": [{"year": 2024, "quarter": 1, "amount": 1}]},
        )
        assert len(loader.find_quarterly_series("ok").data) == 1


class TestLoadActorOverview:
    def test_missing_file_returns_none(self, data_root):
        assert loader.load_actor_overview("2025-01-januar") is None

    def test_malformed_file_returns_none(self, data_root):
        (data_root / "aktorer" / "x.json").write_text("[", encoding="utf-8")
        assert loader.load_actor_overview("x") is None

    def test_loads_actors(self, data_root):
        write_json(
            data_root / "aktorer" / "x.json",
            {"actors": [{"navn": "A"}], "categoryStats": [], "metadata": {"title": "T"}},
        )
        overview = loader.load_actor_overview("x")
        assert overview.actors == [{"navn": "A"}]


class TestBundledData:
    """The sample data shipped in data/ parses and produces a trend."""

    def test_default_report(self, monkeypatch):
        monkeypatch.delenv("PLACE_DATA_DIR", raising=False)
        assert DEFAULT_ANALYSIS_ID in loader.list_analyses()
        analysis = loader.load_analysis(DEFAULT_ANALYSIS_ID)
        assert analysis.plaace_data.nokkeldata.handelsomsetning == 3_250_000_000
        assert loader.load_actor_overview(DEFAULT_ANALYSIS_ID) is not None

    def test_default_quarterly_series(self, monkeypatch):
        monkeypatch.delenv("PLACE_DATA_DIR", raising=False)
        trend = build_trend(loader.load_quarterly_series(DEFAULT_QUARTERLY_SERIES))
        assert len(trend.valid) == 8
        assert trend.years == [2023, 2024]
        q1_2024 = trend.with_yoy.iloc[4]
        assert q1_2024["quarter_label"] == "2024 Q1"
        assert q1_2024["yoy_growth"] == pytest.approx((768 - 742) / 742 * 100)
