"""Convert every examples/*.mmd file and check the resulting documents."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from gitgraph_drawio import build_model, convert
from gitgraph_drawio.config import RenderConfig
from gitgraph_drawio.ir.graph import GraphIR

EXAMPLES_DIR = Path(__file__).parent.parent.parent / "examples"

EXAMPLE_FILES = sorted(EXAMPLES_DIR.glob("*.mmd"))

# name -> (commits, edges, branches)
EXPECTED_COUNTS = {
    "basic": (4, 4, 2),
    "release_flow": (11, 14, 4),
    "degraded": (3, 3, 2),
}


@pytest.mark.parametrize("mm_file", EXAMPLE_FILES, ids=[p.stem for p in EXAMPLE_FILES])
def test_example_converts(mm_file: Path) -> None:
    """Every example yields a well-formed document whose edges point at real cells."""
    src = mm_file.read_text()
    doc = ET.fromstring(convert(src, render=RenderConfig(modified="fixed")))
    cells = doc.findall("./diagram/mxGraphModel/root/mxCell")
    vertex_ids = {c.get("id") for c in cells if c.get("vertex") == "1"}
    for edge in (c for c in cells if c.get("edge") == "1"):
        assert edge.get("source") in vertex_ids
        assert edge.get("target") in vertex_ids


@pytest.mark.parametrize("name,counts", sorted(EXPECTED_COUNTS.items()))
def test_example_counts(name: str, counts: tuple[int, int, int]) -> None:
    model = build_model((EXAMPLES_DIR / f"{name}.mmd").read_text())
    assert (len(model.commits), len(model.edges), len(model.branches)) == counts


def test_release_flow_layout() -> None:
    model = build_model((EXAMPLES_DIR / "release_flow.mmd").read_text())
    gir = GraphIR.from_model(model)
    assert gir.is_dag()
    assert model.commits[0].id == "Initial Commit"
    assert model.commits[0].label == "v0.1"
    assert model.commits[-1].label == "v1.0"
    assert [b.name for b in model.branches] == ["main", "develop", "feature-login", "hotfix"]
    assert model.branch("hotfix").lane_index == 3
    # hotfix forked from main's tip, not from develop's
    assert gir.parents("Fix crash") == ["c1"]
    assert set(gir.parents("merge-19")) == {"merge-15", "merge-17"}
    xs = [c.x for c in model.commits]
    assert xs == [i * 150 for i in range(len(xs))]


def test_degraded_merge_into_itself() -> None:
    model = build_model((EXAMPLES_DIR / "degraded.mmd").read_text())
    assert [c.id for c in model.commits] == ["merge-1", "c2", "merge-6"]
    assert [(e.source_id, e.target_id, e.is_merge_line) for e in model.edges] == [
        ("merge-1", "c2", False),
        ("c2", "merge-6", False),
        ("c2", "merge-6", True),
    ]
    assert GraphIR.from_model(model).edge_count() == 3
