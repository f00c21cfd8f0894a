# MIT License (see LICENSE)
"""
JSON presets and chain snapshots.

A preset file configures a Simulation. Every key is optional; missing keys
take the SimParameters / Chain defaults.

JSON Schema Overview:
---------------------
{
  "spring_constant": float,        # Default: 4
  "rest_length": float,            # Default: 80
  "gravity": float,                # Default: 9.8
  "node_count": int,               # Default: 12
  "force_dampen": float,           # Default: 12
  "friction": float,               # Default: 0.98
  "fps": float,                    # Default: 60
  "max_dt_ms": float,              # Default: 17
  "flick_scale": float,            # Default: 2
  "chain": {                       # Optional layout
    "origin": [x, y],              # Default: [800, 250]
    "mass": float,                 # Default: 0.5
    "gap": float,                  # Default: 160
    "radius": float,               # Default: 6
    "anchor_index": int,           # Default: 0
    "anchor_locked": bool          # Default: true
  }
}

A snapshot (chain_to_json) records the live state of every node plus the
pinned set; chain_from_json restores it onto an existing Chain.
"""
from __future__ import annotations
from dataclasses import asdict, fields
import json
from typing import TYPE_CHECKING, Any

from ..chain import Chain
from ..params import SimParameters
from ..types import Node

if TYPE_CHECKING:
    from ..scene import Simulation

_PARAM_KEYS = {f.name for f in fields(SimParameters)}
_CHAIN_KEYS = {"origin", "mass", "gap", "radius", "anchor_index", "anchor_locked"}


def load_params_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a preset file without building anything.

    Args:
        path: Path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def params_from_json(d: dict[str, Any]) -> SimParameters:
    """
    Build SimParameters from a preset dictionary.

    The optional "chain" section is ignored here.

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    unknown = set(d) - _PARAM_KEYS - {"chain"}
    if unknown:
        raise ValueError(f"Unknown parameter(s) in preset: {sorted(unknown)}")
    return SimParameters(**{k: v for k, v in d.items() if k in _PARAM_KEYS})


def params_to_json(params: SimParameters) -> dict[str, Any]:
    """
    Serialize parameters, keeping only the fields that differ from the defaults.
    """
    defaults = SimParameters()
    return {
        name: value
        for name, value in asdict(params).items()
        if value != getattr(defaults, name)
    }


def chain_from_preset(d: dict[str, Any], count: int) -> Chain:
    """
    Build a Chain from the "chain" section of a preset.

    Raises:
        ValueError: On unknown keys or an invalid layout (e.g. mass <= 0).
    """
    unknown = set(d) - _CHAIN_KEYS
    if unknown:
        raise ValueError(f"Unknown chain setting(s) in preset: {sorted(unknown)}")
    kwargs: dict[str, Any] = {"count": count}
    if "origin" in d:
        kwargs["origin"] = tuple(d["origin"])
    for key in ("mass", "gap", "radius"):
        if key in d:
            kwargs[key] = float(d[key])
    if "anchor_index" in d:
        kwargs["anchor_index"] = int(d["anchor_index"])
    if "anchor_locked" in d:
        kwargs["anchor_locked"] = bool(d["anchor_locked"])
    return Chain(**kwargs)


def load_simulation(path: str) -> "Simulation":
    """
    Load a preset file and build a ready-to-run Simulation.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the preset contains unknown keys or invalid values.
    """
    # Import locally to avoid circular import
    from ..scene import Simulation

    data = load_params_raw(path)
    params = params_from_json(data)
    chain = chain_from_preset(data.get("chain", {}), params.node_count)
    return Simulation(params=params, chain=chain)


def save_params(params: SimParameters, path: str, indent: int = 2) -> None:
    """Write parameters to a preset file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(params_to_json(params), f, indent=indent)


def chain_to_json(chain: Chain) -> dict[str, Any]:
    """
    Snapshot the live chain state.

    Returns:
        {"nodes": [{"position", "velocity", "mass", "radius"}, ...],
         "pinned": sorted indices, "dragged": index or None}
    """
    return {
        "nodes": [
            {
                "position": list(n.position),
                "velocity": list(n.velocity),
                "mass": n.mass,
                "radius": n.radius,
            }
            for n in chain.nodes
        ],
        "pinned": sorted(chain.pinned),
        "dragged": chain.dragged,
    }


def chain_from_json(chain: Chain, d: dict[str, Any]) -> None:
    """
    Restore a snapshot onto `chain` in place.

    Any drag in progress is ended; the snapshot's dragged index is not
    restored since there is no pointer to drive it. Every pinned node is
    stopped, whatever velocity the snapshot stored for it.

    Raises:
        ValueError: If the snapshot has no nodes, pins an index past its end
                    or is too short to hold the chain's anchor.
    """
    nodes = [
        Node(
            tuple(nd["position"]),
            tuple(nd.get("velocity", (0.0, 0.0))),
            mass=float(nd["mass"]),
            radius=float(nd.get("radius", chain.radius)),
        )
        for nd in d.get("nodes", [])
    ]
    if not nodes:
        raise ValueError("Snapshot contains no nodes")
    pinned = {int(i) for i in d.get("pinned", [])}
    if any(not 0 <= i < len(nodes) for i in pinned):
        raise ValueError(f"Snapshot pins an index outside 0..{len(nodes) - 1}: {sorted(pinned)}")

    if chain.anchor_index >= len(nodes):
        raise ValueError(f"Snapshot has {len(nodes)} nodes, anchor is node {chain.anchor_index}")

    chain.nodes = nodes
    chain.pinned = set()
    chain.dragged = None
    if chain.anchor_locked:
        pinned.add(chain.anchor_index)
    for i in sorted(pinned):
        chain.pin(i)
