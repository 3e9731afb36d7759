import pandas as pd

from conftest import make_records, make_files
from suggest import build_suggestions
from utils import normalize_screenshot_path, normalize_text


def test_top_k_nearest_ranked_by_distance(t0):
    unmatched = make_records([t0], labels=["AAPL"])
    files = make_files(
        [t0 + pd.Timedelta(days=9), t0 - pd.Timedelta(days=3), t0 + pd.Timedelta(days=4)],
        names=["x.png", "aapl_breakout.png", "y.png"],
    )

    s = build_suggestions(unmatched, files, top_k=2)

    assert s["file_name"].tolist() == ["aapl_breakout.png", "y.png"]
    assert s["rank"].tolist() == [1, 2]
    assert s["distance_hours"].tolist() == [72.0, 96.0]
    assert s.iloc[0]["name_similarity"] == 100
    assert "name_sim=100" in s.iloc[0]["reason"]


def test_no_label_means_no_similarity(t0):
    s = build_suggestions(make_records([t0], labels=[""]), make_files([t0]), top_k=3)
    assert s["name_similarity"].tolist() == [0]
    assert s["reason"].tolist() == ["time_diff=0.0h"]


def test_empty_inputs(t0):
    assert build_suggestions(make_records([]), make_files([t0]), 3).empty
    assert build_suggestions(make_records([t0]), make_files([]), 3).empty


def test_normalize_screenshot_path():
    assert normalize_screenshot_path("/public/lovable-uploads/a.png") == "/lovable-uploads/a.png"
    assert normalize_screenshot_path("public/lovable-uploads/a.png") == "/lovable-uploads/a.png"
    assert normalize_screenshot_path("  uploads/b.jpg ") == "/uploads/b.jpg"
    assert normalize_screenshot_path("https://cdn.example.com/c.png") == "https://cdn.example.com/c.png"
    assert normalize_screenshot_path(None) == ""
    assert normalize_screenshot_path("   ") == ""


def test_normalize_text():
    assert normalize_text("AAPL_breakout-2.PNG") == "aapl breakout 2 png"
    assert normalize_text(None) == ""
