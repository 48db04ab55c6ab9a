"""
Utility to load graph instances from JSON files.

Supports single-instance and batch (list of instances) JSON files.
Each instance must have ``nodes`` and ``edges`` keys, with nodes labelled
``0 .. n-1``.
"""

from __future__ import annotations

import json
import os
from typing import Any


def load_instances(path: str) -> list[dict[str, Any]]:
    """
    Load graph instances from a JSON file.

    The file may contain either:
    - A single instance dict (with ``nodes`` and ``edges``)
    - A list of instance dicts

    Parameters
    ----------
    path : str
        Path to the JSON file.

    Returns
    -------
    list[dict]
        List of validated graph instance dicts.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist.
    ValueError
        If the JSON structure is invalid.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Instance file not found: {path}")

    with open(path) as f:
        data = json.load(f)

    if isinstance(data, dict):
        instances = [data]
    elif isinstance(data, list):
        instances = data
    else:
        raise ValueError(
            f"Expected a JSON object or array, got {type(data).__name__}"
        )

    validated = []
    for i, inst in enumerate(instances):
        if not isinstance(inst, dict):
            raise ValueError(f"Instance {i} is not a dict: {type(inst).__name__}")

        for key in ("nodes", "edges"):
            if key not in inst:
                raise ValueError(
                    f"Instance {i} missing required '{key}' key. "
                    f"Expected format: {{\"nodes\": [...], \"edges\": [...]}}"
                )

        if sorted(inst["nodes"]) != list(range(len(inst["nodes"]))):
            raise ValueError(f"Instance {i} nodes must be the integers 0 .. n-1")

        n = len(inst["nodes"])
        for edge in inst["edges"]:
            if "source" not in edge or "target" not in edge:
                raise ValueError(f"Instance {i} has an edge without 'source'/'target': {edge}")
            for endpoint in (edge["source"], edge["target"]):
                if not isinstance(endpoint, int) or not 0 <= endpoint < n:
                    raise ValueError(
                        f"Instance {i} edge {edge} has endpoint {endpoint!r} outside 0 .. {n - 1}"
                    )

        if "metadata" not in inst:
            inst["metadata"] = {
                "generator": "custom",
                "size": len(inst["nodes"]),
                "params": {},
            }

        if "instance_name" not in inst:
            inst["instance_name"] = f"custom_{i}"

        validated.append(inst)

    return validated
