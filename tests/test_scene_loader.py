from __future__ import annotations

import json
from pathlib import Path

import pytest

from explorer.content import load_scene_file
from explorer.world import SceneConfigError, WorldModel


def test_loads_markers_and_merges_info(tmp_path: Path) -> None:
    scene = tmp_path / "scene.json"
    scene.write_text(
        json.dumps(
            {
                "artifacts": [{"type": "wheel", "x": 300}, {"type": "ziggurat", "x": 900}],
                "info": {
                    "ziggurat": {"name": "Ziggurat", "description": "A stepped temple tower."},
                    "wheel": {"name": "Potter's Wheel"},
                },
            }
        ),
        encoding="utf-8",
    )

    info, markers = load_scene_file(scene)
    world = WorldModel.from_scene(info, markers)

    assert [a.name for a in world.artifacts] == ["Potter's Wheel", "Ziggurat"]
    # Partial override keeps the built-in description.
    assert world.artifacts[0].description.startswith("The wheel first appeared")


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SceneConfigError, match="not found"):
        load_scene_file(tmp_path / "nope.json")


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "[]",
        json.dumps({"artifacts": "wheel"}),
        json.dumps({"artifacts": [1, 2]}),
        json.dumps({"artifacts": [], "info": []}),
        json.dumps({"artifacts": [], "info": {"wheel": "x"}}),
    ],
)
def test_malformed_scene_rejected(tmp_path: Path, text: str) -> None:
    scene = tmp_path / "scene.json"
    scene.write_text(text, encoding="utf-8")
    with pytest.raises(SceneConfigError):
        load_scene_file(scene)
