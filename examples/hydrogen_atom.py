from particle_sim import World, Species
from particle_sim.core import kinetic_energy
from particle_sim.logging_config import setup_logging
import numpy as np

setup_logging()

world = World()
# Electron launched sideways past a proton; the inelastic wall will eventually catch it
p = world.add_particle(Species.PROTON, position=(0.0, 0.0, 0.0))
e = world.add_particle(Species.ELECTRON, position=(-80.0, 0.0, 0.0), velocity=(0.0, 0.8, 0.0))

for _ in range(600):
    world.step()

print("proton pos", p.position, "v", p.velocity)
print("electron pos", e.position, "v", e.velocity, "|r|", np.linalg.norm(e.position - p.position))
print("kinetic energy", kinetic_energy(world.particles))
