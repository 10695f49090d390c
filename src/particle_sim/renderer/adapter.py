# MIT License (see LICENSE)
"""
Renderer adapters for the particle world.

The engine has no drawing dependency. Each frame a renderer receives, for
every live particle, its species, world position and render radius; what it
does with them (3D spheres, text, recording) is up to the adapter.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..mapping import world_to_screen
from ..types import Particle, Viewport

if TYPE_CHECKING:
    from ..world import World


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(world)
        for particle in world.particles:
            renderer.draw_particle(particle)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_world(world)
    """

    @abstractmethod
    def begin_frame(self, world: "World") -> None:
        """Begin a new frame. The world gives access to camera and frame index."""
        ...

    @abstractmethod
    def draw_particle(self, particle: Particle) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_world(self, world: "World") -> None:
        """Render every particle of the world as one frame."""
        self.begin_frame(world)
        for particle in world.particles:
            self.draw_particle(particle)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame 42 (running) yaw=0.00 pitch=0.00 ===
        [0] proton r=8 @ (12.50, -3.00, 0.00) v=(0.01, 0.00, 0.00)
        [1] electron r=2 @ (-40.00, 0.00, 0.00) v=(-0.20, 0.00, 0.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._index = 0

    def begin_frame(self, world: "World") -> None:
        self._index = 0
        state = "running" if world.running else "paused"
        self.output.write(
            f"=== Frame {world.frame} ({state}) yaw={world.camera.yaw:.2f} pitch={world.camera.pitch:.2f} ===\n"
        )

    def draw_particle(self, particle: Particle) -> None:
        x, y, z = particle.position
        line = f"[{self._index}] {particle.species.value} r={particle.radius:g} @ ({x:.2f}, {y:.2f}, {z:.2f})"
        if self.verbose:
            vx, vy, vz = particle.velocity
            line += f" v=({vx:.2f}, {vy:.2f}, {vz:.2f})"
        self.output.write(line + "\n")
        self._index += 1

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, world: "World") -> None:
        pass

    def draw_particle(self, particle: Particle) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records per-frame particle views for later retrieval.

    If a viewport is given, each record also carries the particle's screen
    position under the frame's camera orientation.

    Example:
        renderer = BufferedRenderer(viewport=Viewport(800, 600))
        for _ in range(100):
            world.step()
            renderer.render_world(world)
        for frame in renderer.frames:
            print(frame["frame"], len(frame["particles"]))
    """

    def __init__(self, viewport: Viewport | None = None):
        self.viewport = viewport
        self.frames: list[dict] = []
        self._current_frame: dict | None = None
        self._world: World | None = None

    def begin_frame(self, world: "World") -> None:
        self._world = world
        self._current_frame = {
            "frame": world.frame,
            "running": world.running,
            "camera": (world.camera.yaw, world.camera.pitch),
            "particles": [],
        }

    def draw_particle(self, particle: Particle) -> None:
        if self._current_frame is None:
            return
        record = {
            "species": particle.species.value,
            "color": particle.species.color,
            "radius": particle.radius,
            "position": particle.position.tolist(),
        }
        if self.viewport is not None and self._world is not None:
            record["screen"] = world_to_screen(
                particle.position,
                self.viewport.width,
                self.viewport.height,
                self._world.camera,
                self._world.space_size,
            )
        self._current_frame["particles"].append(record)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None
            self._world = None

    def clear(self) -> None:
        self.frames.clear()
