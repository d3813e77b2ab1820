"""
Global constants
================
Central registry of the numbers shared by the core, the controllers and the
viewer.

Exports:
    MAX_VERTICES (int): hard vertex limit; the renderer stores indices in one byte.
    DEFAULT_NUM_VERTICES (int), DEFAULT_RADIUS (float): point cloud defaults.
    DEFAULT_THRESHOLD (float): start value used by the viewer.
    THRESHOLD_STEP (float): increment applied by one key press.
    MAX_ATTEMPTS_PER_POINT (int): rejection sampling cap, per requested point.
    ROTATION_SENSITIVITY (float): radians per pixel of mouse drag.
"""

# Index encoding: uint8, indices 0..254
MAX_VERTICES: int = 255

# Point cloud
DEFAULT_NUM_VERTICES: int = 200
DEFAULT_RADIUS: float = 0.5
MAX_ATTEMPTS_PER_POINT: int = 10_000

# Threshold stepping
DEFAULT_THRESHOLD: float = 0.25
THRESHOLD_STEP: float = 0.01

# Input / render loop
ROTATION_SENSITIVITY: float = 1.0 / 100.0
FRAME_INTERVAL_MS: int = 16

# RGBA
POINT_COLOR = (1.0, 0.0, 0.0, 1.0)
LINE_COLOR = (1.0, 0.0, 0.0, 1.0)
TRIANGLE_COLOR = (0.3, 0.0, 0.0, 1.0)
