import io

import pytest
from particle_sim.world import World
from particle_sim.species import Species
from particle_sim.types import Viewport
from particle_sim.renderer import BufferedRenderer, DebugRenderer, NullRenderer


def make_world():
    world = World()
    world.add_particle(Species.PROTON, (0.0, 0.0, 0.0))
    world.add_particle(Species.ELECTRON, (100.0, 0.0, 0.0))
    return world


def test_buffered_renderer_records_frames():
    world = make_world()
    renderer = BufferedRenderer(viewport=Viewport(800, 600))
    for _ in range(3):
        world.step()
        renderer.render_world(world)

    assert len(renderer.frames) == 3
    last = renderer.frames[-1]
    assert last["frame"] == 3
    assert [p["species"] for p in last["particles"]] == ["proton", "electron"]
    assert last["particles"][0]["radius"] == 8.0
    assert last["particles"][1]["color"] == Species.ELECTRON.color
    sx, sy = renderer.frames[0]["particles"][0]["screen"]
    assert sx == pytest.approx(400.0, abs=1e-3)
    assert sy == pytest.approx(300.0, abs=1e-3)

    renderer.clear()
    assert renderer.frames == []


def test_debug_renderer_output():
    world = make_world()
    world.pause()
    out = io.StringIO()
    DebugRenderer(out, verbose=False).render_world(world)
    text = out.getvalue()
    print(text)

    assert "=== Frame 0 (paused)" in text
    assert "[0] proton r=8 @ (0.00, 0.00, 0.00)" in text
    assert "[1] electron r=2 @ (100.00, 0.00, 0.00)" in text
    assert " v=(" not in text


def test_null_renderer():
    NullRenderer().render_world(make_world())
