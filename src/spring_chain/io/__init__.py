# MIT License (see LICENSE)
"""
Input/Output utilities for the spring chain.

This subpackage provides:
    - Presets: load and save SimParameters (plus chain layout) as JSON.
    - Snapshots: capture and restore the live node state of a Chain.

Typical usage:
    from spring_chain.io import load_simulation, save_params, chain_to_json

    sim = load_simulation("preset.json")
    save_params(sim.params, "tuned.json")
    data = chain_to_json(sim.chain)
"""
from .json_io import (
    load_params_raw,
    load_simulation,
    save_params,
    params_to_json,
    params_from_json,
    chain_from_preset,
    chain_to_json,
    chain_from_json,
)

__all__ = [
    # Loading
    "load_params_raw",
    "load_simulation",
    # Saving
    "save_params",
    # Serialization
    "params_to_json",
    "params_from_json",
    "chain_from_preset",
    "chain_to_json",
    "chain_from_json",
]
