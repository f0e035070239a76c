from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyvista as pv

from turtlegrid.config import CELL_CENTER_OFFSET, CELL_SIZE, MODEL_ELEVATION, TURTLE_COLOR
from turtlegrid.model.orientation import placement_for

if TYPE_CHECKING:
    import numpy.typing as npt
    from turtlegrid.model.turtle import Turtle

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------------
# Placement helpers
# -------------------------------------------------------------------------------

def model_translation(turtle: Turtle) -> npt.NDArray[np.float64]:
    """World position of the turtle model for the turtle's cell and facing."""
    placement = placement_for(turtle.facing)
    return np.array(
        [placement.start_x + turtle.x, turtle.y + MODEL_ELEVATION, placement.start_z + turtle.z],
        dtype=np.float64,
    )


def camera_focus(turtle: Turtle) -> npt.NDArray[np.float64]:
    """Centre of the turtle's cell."""
    return np.array(turtle.position, dtype=np.float64) + CELL_CENTER_OFFSET

# -------------------------------------------------------------------------------
# Actor
# -------------------------------------------------------------------------------

class TurtleActor:
    """
    Turtle model made of a body box and a nose box.

    The model is built looking down its local -X axis; placement_for() yaw
    turns it toward the turtle's facing. Connect `update` to
    TurtleStore.turtle_changed to follow the selected turtle.
    """
    def __init__(self, plotter: pv.Plotter | None = None, size: float = 0.8 * CELL_SIZE,
                 color: str = TURTLE_COLOR) -> None:
        self.plotter = plotter
        self.color = color

        half = size / 2
        nose = size / 8
        self._body = pv.Box(bounds=(-half, half, -half, half, -half, half))
        self._nose = pv.Box(bounds=(-half - 2 * nose, -half, -nose, nose, -nose, nose))

        self.meshes: dict[str, pv.PolyData] = {}
        self._actors: dict[str, pv.Actor] = {}

    def build_meshes(self, turtle: Turtle) -> dict[str, pv.PolyData]:
        """Body and nose meshes positioned for `turtle`."""
        yaw_deg = float(np.degrees(placement_for(turtle.facing).rot_y))
        offset = model_translation(turtle)

        meshes = {}
        for name, base in (("body", self._body), ("nose", self._nose)):
            mesh = base.rotate_y(yaw_deg, point=(0.0, 0.0, 0.0), inplace=False)
            meshes[name] = mesh.translate(offset, inplace=False)
        return meshes

    def update(self, turtle: Turtle | None) -> None:
        if turtle is None:
            self.clear()
            return

        self.meshes = self.build_meshes(turtle)
        logger.debug(f"Turtle {turtle.uuid} placed at {model_translation(turtle)} facing {turtle.facing}")

        if self.plotter is None:
            return

        for name, mesh in self.meshes.items():
            # add_mesh with an existing name replaces that actor
            self._actors[name] = self.plotter.add_mesh(
                mesh,
                color=self.color,
                name=f"turtle-{name}",
                pickable=False,
                show_scalar_bar=False,
            )
        self.plotter.camera.focal_point = tuple(camera_focus(turtle))
        self.plotter.render()

    def clear(self) -> None:
        if self.plotter is not None:
            for actor in self._actors.values():
                self.plotter.remove_actor(actor)
        self._actors.clear()
        self.meshes = {}
