# MIT License (see LICENSE)
"""
Command line entry point.

Run the interactive viewer:
    spring-chain --nodes 10 --k 6

Run headless and print every 60th frame:
    spring-chain --headless --frames 600 --every 60
"""
from __future__ import annotations
import argparse
import logging

from .io.json_io import load_simulation
from .renderer.adapter import DebugRenderer
from .scene import Simulation


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="spring-chain", description="Interactive 2D mass-spring chain")
    add = p.add_argument
    add("--config", help="JSON preset file")
    add("--nodes", help="number of nodes")
    add("--k", help="spring constant")
    add("--length", help="spring rest length")
    add("--gravity", help="gravity")
    add("--unlock-anchor", action="store_true", help="allow unpinning and dragging node 0")
    add("--ratio", type=float, default=1.0, help="device pixel ratio for the viewer")
    add("--headless", action="store_true", help="step without a window and print frames")
    add("--frames", type=int, default=600, help="frames to run in headless mode")
    add("--dt", type=float, default=16.0, help="step size in ms for headless mode")
    add("--every", type=int, default=60, help="print every Nth frame in headless mode")
    add("--log-level", default="WARNING", help="logging level")
    return p


def build_simulation(args: argparse.Namespace) -> Simulation:
    sim = load_simulation(args.config) if args.config else Simulation()
    if args.unlock_anchor:
        sim.chain.anchor_locked = False
    # Command line values go through the same validated setters as UI input.
    if args.k is not None:
        sim.set_spring_constant(args.k)
    if args.length is not None:
        sim.set_rest_length(args.length)
    if args.gravity is not None:
        sim.set_gravity(args.gravity)
    if args.nodes is not None and sim.set_node_count(args.nodes):
        # Becomes the default length that reset() rebuilds to.
        sim.chain.count = len(sim.chain)
        sim.reset()
    return sim


def run_headless(sim: Simulation, frames: int, dt_ms: float, every: int) -> None:
    renderer = DebugRenderer()
    for _ in range(frames):
        sim.step(dt_ms)
        if every > 0 and sim.frame % every == 0:
            sim.render(renderer)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    sim = build_simulation(args)

    if args.headless:
        run_headless(sim, args.frames, args.dt, args.every)
        return

    from .renderer.pygame_view import PygameView

    PygameView(sim, ratio=args.ratio).run()


if __name__ == "__main__":
    main()
