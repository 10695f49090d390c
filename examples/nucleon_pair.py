from particle_sim import World, Species
from particle_sim.constants import STRONG_FORCE_DISTANCE
import numpy as np

world = World()
# Two nucleons released slightly beyond the equilibrium separation settle into the well
a = world.add_particle(Species.PROTON, position=(0.6 * STRONG_FORCE_DISTANCE, 0.0, 0.0))
b = world.add_particle(Species.NEUTRON, position=(-0.6 * STRONG_FORCE_DISTANCE, 0.0, 0.0))

for i in range(200):
    world.step()
    if i % 20 == 0:
        print(f"frame {world.frame:4d}  separation {np.linalg.norm(a.position - b.position):8.3f}")
