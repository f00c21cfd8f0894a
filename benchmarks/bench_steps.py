"""
Microbenchmark: time per frame vs number of nodes.
Run:
  python benchmarks/bench_steps.py
"""
import time
from spring_chain import Simulation, SimParameters
from spring_chain.profiler import Profiler
from spring_chain.renderer import NullRenderer


def run(n: int, steps: int = 600):
    prof = Profiler()
    sim = Simulation(params=SimParameters(node_count=n), profiler=prof)
    renderer = NullRenderer()

    # warmup
    for _ in range(30):
        sim.step(16)

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step(16)
        sim.render(renderer)
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 50, 100, 250, 500]:
        per_step, summary = run(n)
        print(f"N={n:4d}  frame={1e3*per_step:8.3f} ms  frames/s={1/per_step:8.1f}")
        for k in ["integrate", "render"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
