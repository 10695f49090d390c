from particle_sim import World, PointerState, Viewport
from particle_sim.renderer import DebugRenderer

# Drive the world the way a host render loop would: one update() per frame.
viewport = Viewport(800, 600)
world = World()
renderer = DebugRenderer()

frames = [
    (PointerState(420, 300, True), "proton"),
    (PointerState(420, 300, False), "proton"),
    (PointerState(380, 300, True), "electron"),
    (PointerState(380, 300, False), "electron"),
    (PointerState(400, 300, True), "pan"),
    (PointerState(460, 330, True), "pan"),
    (PointerState(460, 330, False), "pan"),
]
for pointer, tool in frames:
    world.update(pointer, viewport, tool)
    renderer.render_world(world)
