"""
JSON scene loading.

Scene file format:
    {
      "artifacts": [{"type": "wheel", "x": 400}, ...],
      "info": {"wheel": {"name": "...", "description": "..."}}   # optional
    }

`info` entries are merged over the built-in registry, so a scene can add new
artifact types or reword existing ones.
"""
from __future__ import annotations

import json
from pathlib import Path

from explorer.content.artifacts import ARTIFACT_INFO
from explorer.debug import debug_log
from explorer.world import SceneConfigError


def load_scene_file(path: str | Path) -> tuple[dict, list[dict]]:
    """Read a scene file. Returns (artifact info registry, marker list)."""
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise SceneConfigError(f"scene file not found: {p}") from None
    except json.JSONDecodeError as e:
        raise SceneConfigError(f"scene file {p} is not valid JSON: {e}") from None
    except UnicodeDecodeError as e:
        raise SceneConfigError(f"scene file {p} is not UTF-8 text: {e}") from None
    except OSError as e:
        raise SceneConfigError(f"cannot read scene file {p}: {e.strerror or e}") from None

    if not isinstance(data, dict):
        raise SceneConfigError(f"scene file {p} must contain a JSON object")

    markers = data.get("artifacts")
    if not isinstance(markers, list) or not all(isinstance(m, dict) for m in markers):
        raise SceneConfigError(f"scene file {p}: 'artifacts' must be a list of objects")

    info = {k: dict(v) for k, v in ARTIFACT_INFO.items()}
    extra = data.get("info", {})
    if not isinstance(extra, dict):
        raise SceneConfigError(f"scene file {p}: 'info' must be an object")
    for type_id, entry in extra.items():
        if not isinstance(entry, dict):
            raise SceneConfigError(f"scene file {p}: info for '{type_id}' must be an object")
        info[str(type_id)] = {**info.get(str(type_id), {}), **entry}

    debug_log(f"Loaded scene {p} ({len(markers)} artifacts)")
    return info, markers
