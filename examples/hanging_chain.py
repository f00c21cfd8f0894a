# examples/hanging_chain.py
from spring_chain import Simulation
from spring_chain.core import max_speed

sim = Simulation()

while sim.frame < 3000:
    sim.step(16)

print("frames:", sim.frame, "t(ms):", sim.time_ms)
print("max speed:", max_speed(sim.chain))
print("positions:\n", sim.positions())
