"""
Microbenchmark: time per step vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from particle_sim import World, Species
from particle_sim.profiler import Profiler

def run(n: int, steps: int = 100):
    prof = Profiler()
    world = World(profiler=prof)

    rng = np.random.default_rng(12345)  # determinism
    kinds = list(Species)
    for _ in range(n):
        species = kinds[int(rng.integers(len(kinds)))]
        world.add_particle(species, rng.uniform(-150.0, 150.0, size=3))

    # warmup
    for _ in range(5):
        world.step()
    prof.stats.reset()

    t0 = time.perf_counter()
    for _ in range(steps):
        world.step()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 25, 50, 100, 200]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["accelerations", "positions"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
