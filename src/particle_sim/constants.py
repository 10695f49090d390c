# MIT License (see LICENSE)
"""
Simulation constants.

The engine works in simulation units rather than SI so that a single
per-frame update produces visible motion:

    length  picometres (pm)
    charge  elementary charges (e)
    mass    proton masses
    time    one rendered frame

The Coulomb constant below is therefore a tuning value, not the physical
k = 1/(4πε₀).
"""
from __future__ import annotations

# Coulomb-like coupling constant, tuned so an electron 100 pm from a proton
# gains roughly 0.01 pm/frame of speed per frame.
K_SIM: float = 0.05

# Separation at which two nucleons sit in equilibrium inside the strong-force
# well. The well spans 0 < r <= 2 * STRONG_FORCE_DISTANCE.
STRONG_FORCE_DISTANCE: float = 10.0

# Smallest separation used in any force denominator or tangent argument.
# Keeps the 1/r² and tan() poles finite.
MIN_SEPARATION: float = 0.1

# Separations below this are treated as coincident: zero force.
ZERO_DISTANCE: float = 1e-12

# Edge length of the simulated space. The viewport's shorter side maps onto it,
# and particles are confined to a sphere of radius SPACE_SIZE / 2.
SPACE_SIZE: float = 500.0

# Pixels of pan drag per radian of camera rotation.
PAN_SENSITIVITY: float = 100.0

# Pixel radius of the selection ring drawn by the move tool.
SELECTION_RADIUS: float = 50.0
