# MIT License (see LICENSE)
"""
The simulation world and its per-frame loop.

World owns the particles, the run/pause flag and the camera orientation.
It has no timers or threads: the host calls update() (or the individual
steps) once per rendered frame, handing in the pointer state, the viewport
and the tool selected in its GUI.

Per frame:
    1. Pan drag rotates the camera (PAN tool held down).
    2. A fresh pointer press inside the placement circle adds a particle of
       the selected species, running or paused.
    3. If running, every particle's acceleration is computed from the same
       snapshot, then every particle is integrated and clamped.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

from .constants import SPACE_SIZE, PAN_SENSITIVITY, SELECTION_RADIUS
from .core.forces import ForceParams, DEFAULT_FORCE_PARAMS
from .mapping import screen_to_world, world_to_screen, in_placement_region
from .profiler import Profiler
from .species import Species, Tool
from .types import Particle, PointerState, Viewport, CameraOrientation
from .util import f64, clamp_to_sphere

logger = logging.getLogger(__name__)


@dataclass
class World:
    """
    Particle simulation world.

    Attributes:
        space_size: World units spanned by the viewport's shorter side.
                    Particles are confined to a sphere of radius space_size/2.
        force_params: Constants of the force model.
        pan_sensitivity: Pixels of pan drag per radian of camera rotation.
        profiler: Optional Profiler timing the step phases.
        particles: Live particles, in insertion order.
        running: False while paused. Paused worlds still accept placements.
        camera: Current camera orientation.
        last_pointer_pressed: Pointer state seen by the previous placement
                              call, used for edge-triggering.
        frame: Number of running steps taken.
    """
    space_size: float = SPACE_SIZE
    force_params: ForceParams = DEFAULT_FORCE_PARAMS
    pan_sensitivity: float = PAN_SENSITIVITY
    profiler: Profiler | None = None

    particles: list[Particle] = field(default_factory=list)
    running: bool = True
    camera: CameraOrientation = field(default_factory=CameraOrientation)
    last_pointer_pressed: bool = False
    frame: int = 0

    def __post_init__(self) -> None:
        if self.space_size <= 0:
            raise ValueError(f"space_size must be positive, got {self.space_size}")
        if self.pan_sensitivity <= 0:
            raise ValueError(f"pan_sensitivity must be positive, got {self.pan_sensitivity}")
        self._pan_anchor: tuple[float, float] | None = None
        self._pan_start = self.camera

    @property
    def bound_radius(self) -> float:
        """Radius of the bounding sphere."""
        return self.space_size / 2

    # ------------------------------------------------------------------
    # Particles
    # ------------------------------------------------------------------

    def add_particle(
        self,
        species: Species | str,
        position=(0.0, 0.0, 0.0),
        velocity=(0.0, 0.0, 0.0),
    ) -> Particle | None:
        """
        Add a particle directly at a world position.

        The position is clamped into the bounding sphere. An unrecognised
        species tag adds nothing and returns None.
        """
        kind = Species.parse(species)
        if kind is None:
            return None
        particle = Particle(
            species=kind,
            position=clamp_to_sphere(f64(position), self.bound_radius),
            velocity=velocity,
        )
        self.particles.append(particle)
        return particle

    def place_particle(
        self,
        pointer: PointerState,
        viewport: Viewport,
        tool: Tool | Species | str | None,
        camera: CameraOrientation | None = None,
    ) -> Particle | None:
        """
        Place a particle under the pointer on a fresh press.

        A particle is created only when the pointer goes from released to
        pressed since the previous call, the pointer is inside the placement
        circle, and the tool is a particle tool. Anything else is a no-op.

        Args:
            pointer: Current pointer state.
            viewport: Current viewport size.
            tool: Selected tool (Tool or its string tag).
            camera: Orientation to map through; defaults to self.camera.

        Returns:
            The new particle, or None if nothing was placed.
        """
        just_pressed = pointer.pressed and not self.last_pointer_pressed
        self.last_pointer_pressed = pointer.pressed
        if not just_pressed:
            return None

        selected = Tool.parse(tool)
        species = selected.species if selected is not None else None
        if species is None:
            return None

        if not in_placement_region(pointer.x, pointer.y, viewport.width, viewport.height):
            logger.debug("Press at (%.1f, %.1f) outside placement region", pointer.x, pointer.y)
            return None

        position = screen_to_world(
            pointer.x, pointer.y, viewport.width, viewport.height,
            camera or self.camera, self.space_size,
        )
        particle = self.add_particle(species, position)
        logger.debug("Placed %s at %s", species.value, particle.position)
        return particle

    def clear(self) -> None:
        """Remove every particle."""
        logger.info("Clearing %d particles", len(self.particles))
        self.particles = []

    def query_pointer(
        self,
        pointer: PointerState,
        viewport: Viewport,
        radius: float = SELECTION_RADIUS,
    ) -> list[Particle]:
        """
        Particles whose screen projection lies within radius pixels of the pointer.

        Used for the move tool's selection ring. Does not modify the world.
        """
        hits = []
        r2 = radius * radius
        for p in self.particles:
            sx, sy = world_to_screen(p.position, viewport.width, viewport.height, self.camera, self.space_size)
            dx, dy = sx - pointer.x, sy - pointer.y
            if dx * dx + dy * dy <= r2:
                hits.append(p)
        return hits

    # ------------------------------------------------------------------
    # Run state and commands
    # ------------------------------------------------------------------

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        self.running = True

    def toggle_running(self) -> bool:
        """Flip between running and paused. Returns the new running state."""
        self.running = not self.running
        logger.info("Simulation %s", "resumed" if self.running else "paused")
        return self.running

    def handle_command(self, name: str) -> bool:
        """
        Execute a discrete host command.

        "pause" toggles the run state, "resume" (or "play") resumes and
        "clear" removes every particle.

        Unknown commands are logged and ignored.

        Returns:
            True if the command was recognised.
        """
        command = str(name).strip().lower()
        if command == "pause":
            self.toggle_running()
        elif command in ("resume", "play"):
            self.resume()
        elif command == "clear":
            self.clear()
        else:
            logger.warning("Ignoring unknown command %r", name)
            return False
        return True

    # ------------------------------------------------------------------
    # Camera
    # ------------------------------------------------------------------

    def pan_camera(self, pointer: PointerState) -> CameraOrientation:
        """
        Rotate the camera by dragging.

        The first pressed call anchors the drag; while the pointer stays down
        the camera is the orientation at the anchor plus the drag offset
        divided by pan_sensitivity (x drives yaw, y drives pitch). A released
        pointer ends the drag.
        """
        if not pointer.pressed:
            self.release_pan()
            return self.camera
        if self._pan_anchor is None:
            self._pan_anchor = (pointer.x, pointer.y)
            self._pan_start = self.camera
        ax, ay = self._pan_anchor
        self.camera = self._pan_start.offset(
            (pointer.x - ax) / self.pan_sensitivity,
            (pointer.y - ay) / self.pan_sensitivity,
        )
        return self.camera

    def release_pan(self) -> None:
        self._pan_anchor = None

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    def step(self) -> None:
        """
        Advance every particle by one frame, unless paused.

        All accelerations are computed from the positions at the start of
        the frame before any particle moves.
        """
        if not self.running:
            return

        snapshot = tuple(self.particles)
        with self._section("accelerations"):
            for particle in snapshot:
                particle.update_acceleration(snapshot, self.force_params)

        with self._section("positions"):
            for particle in snapshot:
                particle.update_position(self.bound_radius)

        self.frame += 1

    def update(
        self,
        pointer: PointerState,
        viewport: Viewport,
        tool: Tool | Species | str | None,
    ) -> None:
        """
        Per-frame entry point: camera pan, placement, then physics.
        """
        selected = Tool.parse(tool)
        if selected is Tool.PAN and pointer.pressed:
            self.pan_camera(pointer)
        else:
            self.release_pan()

        self.place_particle(pointer, viewport, selected)
        self.step()
