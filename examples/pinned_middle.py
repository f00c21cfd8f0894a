from spring_chain import Simulation

sim = Simulation()
sim.set_node_count(8)

# Shift-click equivalent: pin node 4 where it hangs
sim.pointer_down(tuple(sim.nodes[4].position), pin_modifier=True)
sim.set_gravity("20")

for _ in range(2000):
    sim.step(16)

print("pinned:", sorted(sim.chain.pinned))
print("positions:\n", sim.positions())
