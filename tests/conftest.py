import json

import pytest

from place_analysis.types import QuarterlySeries


def make_series(points, **metadata):
    """Build a QuarterlySeries from (year, quarter, amount) tuples."""
    return QuarterlySeries.from_dict(
        {
            "metadata": {"title": "Test", "currency": "NOK", **metadata},
            "data": [
                {"year": y, "quarter": q, "quarterLabel": f"{y} Q{q}", "amount": a}
                for y, q, a in points
            ],
        }
    )


@pytest.fixture
def example_series():
    return make_series([(2023, 1, 100), (2024, 1, 150), (2024, 2, 0)])


@pytest.fixture
def data_root(tmp_path, monkeypatch):
    """Empty data directory wired up through PLACE_DATA_DIR."""
    for folder in ("analyses", "aktorer", "quarterly"):
        (tmp_path / folder).mkdir()
    monkeypatch.setenv("PLACE_DATA_DIR", str(tmp_path))
    return tmp_path


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
