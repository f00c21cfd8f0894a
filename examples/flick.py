from spring_chain import Simulation
from spring_chain.renderer import DebugRenderer
import numpy as np

sim = Simulation()
for _ in range(600):
    sim.step(16)

# Grab the last node, pull it sideways over a few frames, then let go
tip = sim.nodes[-1].position.clone()
sim.pointer_down(tuple(tip))
for i in range(1, 11):
    sim.pointer_move((tip.x + 12 * i, tip.y - 4 * i))
    sim.step(16)
sim.pointer_up((tip.x + 150, tip.y - 50))
print("release velocity:", sim.velocities()[-1])

for _ in range(120):
    sim.step(16)
sim.render(DebugRenderer())
print("tip swing:", float(np.ptp(sim.positions()[:, 0])))
