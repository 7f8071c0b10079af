# treemap_labels/core/camera.py
"""
Minimal camera: viewport size and view-projection matrix, enough to project
label anchors into normalized device coordinates (NDC) and to normalize
pixel extents. Matrices are row-major and applied as M @ [x, y, z, 1].
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from treemap_labels.core.types import Vec2, Vec3


@dataclass(eq=False)
class Camera:
    """Viewport in px and a 4x4 view-projection transform."""
    width: int
    height: int
    view_projection: np.ndarray = field(default_factory=lambda: np.eye(4))

    def __post_init__(self) -> None:
        self.view_projection = np.asarray(self.view_projection, dtype=np.float64)
        if self.view_projection.shape != (4, 4):
            raise ValueError(f"view_projection must be 4x4, got shape {self.view_projection.shape}")

    @property
    def valid(self) -> bool:
        return self.width > 0 and self.height > 0

    @classmethod
    def from_look_at(
        cls,
        width: int,
        height: int,
        eye: Vec3,
        center: Vec3,
        up: Vec3 = (0.0, 1.0, 0.0),
        fovy_deg: float = 45.0,
        near: float = 0.1,
        far: float = 10.0,
    ) -> Camera:
        aspect = width / height if height else 1.0
        vp = perspective(fovy_deg, aspect, near, far) @ look_at(eye, center, up)
        return cls(width=width, height=height, view_projection=vp)


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> np.ndarray:
    """Right-handed view matrix (OpenGL convention)."""
    e = np.asarray(eye, dtype=np.float64)
    f = np.asarray(center, dtype=np.float64) - e
    f /= np.linalg.norm(f)
    s = np.cross(f, np.asarray(up, dtype=np.float64))
    s /= np.linalg.norm(s)
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[:3, 3] = -m[:3, :3] @ e
    return m


def perspective(fovy_deg: float, aspect: float, near: float, far: float) -> np.ndarray:
    """OpenGL-style perspective projection; depth maps to [-1, 1]."""
    f = 1.0 / math.tan(math.radians(fovy_deg) / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = 2.0 * far * near / (near - far)
    m[3, 2] = -1.0
    return m


def project_to_ndc(camera: Camera, position: Vec3) -> Vec2:
    """Project a 3D point with the camera's view-projection; homogeneous divide by w."""
    p = camera.view_projection @ np.array([position[0], position[1], position[2], 1.0])
    w = p[3]
    return (float(p[0] / w), float(p[1] / w))
