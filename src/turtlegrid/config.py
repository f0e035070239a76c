"""
Configuration & Global Constants
================================
This module serves as the central registry for grid and rendering constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (cell size, model elevation, ...)
   scattered throughout the render code.
2. Consistency: Placement, camera focus and model size read the same
   values.

Exports:
    CELL_SIZE (float): Edge length of one grid cell in world units.
    CELL_CENTER_OFFSET (float): Offset from a cell corner to its centre.
    MODEL_ELEVATION (float): Height of the turtle model above the cell floor.
    TURTLE_COLOR (str): Fill colour of the turtle model.
"""

# Global Constants
CELL_SIZE: float = 1.0
CELL_CENTER_OFFSET: float = CELL_SIZE / 2
MODEL_ELEVATION: float = 0.5
TURTLE_COLOR: str = "#56982E"
