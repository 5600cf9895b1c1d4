"""A rotating wireframe cube: camera setup, projection and frame drawing."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Sequence

from the_cube.linalg import Matrix4, Vector3, Vector4, subtract

WIDTH = 400
HEIGHT = 240
PI = 3.1415
RADIAN_TO_DEGREE = 180 / PI

EYE = (0.0, 0.1, 10.0)
TARGET = (0.0, 0.0, 0.0)
UP = (0.0, 0.0, 1.0)

DEFAULT_SPIN = 0.0374533
MIN_SPIN = 0.0174533
MAX_SPIN = 17.4527
SPIN_STEP = 0.005

LINE_WIDTH = 3
TEXT_POSITION = (5, 220)

CUBE_POINTS = (
    (-1.0, -1.0, -1.0),
    (-1.0, 1.0, -1.0),
    (1.0, 1.0, -1.0),
    (1.0, -1.0, -1.0),
    (-1.0, -1.0, 1.0),
    (-1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0),
    (1.0, -1.0, 1.0),
)

SQUARES = (
    (3, 2, 1, 0),
    (7, 6, 2, 3),
    (4, 5, 6, 7),
    (0, 1, 5, 4),
    (5, 1, 2, 6),
    (0, 4, 7, 3),
)


class Button(enum.IntFlag):
    LEFT = 1
    RIGHT = 2
    UP = 4
    DOWN = 8
    B = 16
    A = 32


class Color(enum.Enum):
    BLACK = "black"
    WHITE = "white"


@dataclass
class Canvas:
    """A drawing surface that records the commands issued to it."""

    operations: list[tuple[Any, ...]] = field(default_factory=list)

    def clear(self, color: Color) -> None:
        self.operations.clear()
        self.operations.append(("clear", color))

    def draw_text(self, text: str, x: int, y: int) -> None:
        self.operations.append(("text", text, x, y))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, width: int, color: Color) -> None:
        self.operations.append(("line", x1, y1, x2, y2, width, color))

    def fill_polygon(self, points: Sequence[Sequence[int]], color: Color) -> None:
        self.operations.append(("polygon", tuple(tuple(p) for p in points), color))


def camera_basis(
    eye: Sequence[float], target: Sequence[float], up: Sequence[float]
) -> tuple[Vector3, Vector3, Vector3]:
    """Return the orthonormal camera axes (w, u, v) for a camera at ``eye`` looking at ``target``."""
    w = Vector3(*subtract(target, eye)).normalized()
    u = Vector3(*up).cross(w).normalized()
    v = w.cross(u).normalized()
    return w, u, v


def make_view_matrix(
    eye: Sequence[float],
    target: Sequence[float],
    up: Sequence[float],
    width: int,
    height: int,
) -> Matrix4:
    """Build the combined viewport, perspective and camera matrix."""
    w, u, v = camera_basis(eye, target, up)
    viewport = Matrix4((
        width / 2, 0, 0, (width - 1) / 2,
        0, height / 2, 0, (height - 1) / 2,
        0, 0, 1, 0,
        0, 0, 0, 1,
    ))
    orientation = Matrix4((*u, 0, *v, 0, *w, 0, 0, 0, 0, 1))
    translation = Matrix4((
        1, 0, 0, -eye[0],
        0, 1, 0, -eye[1],
        0, 0, 1, -eye[2],
        0, 0, 0, 1,
    ))
    near, far = -1.0, -1000.0
    fov = 2 * PI * (45 / 360)
    left = -math.tan(fov / 2)
    right = -left
    top = right * 0.6
    bottom = left * 0.6
    perspective = Matrix4((
        2 * near / (right - left), 0, (left + right) / (left - right), 0,
        0, 2 * near / (top - bottom), (top + bottom) / (bottom - top), 0,
        0, 0, (far + near) / (near - far), 2 * far * near / (far - near),
        0, 0, 1, 0,
    ))
    return viewport @ perspective @ (orientation @ translation)


def rotation_matrices(spin: float) -> dict[Button, Matrix4]:
    """Map each button to the rotation it applies, in the order buttons are handled."""
    c = math.cos(spin)
    s = math.sin(spin)
    return {
        Button.UP: Matrix4((1, 0, 0, 0, 0, c, -s, 0, 0, s, c, 0, 0, 0, 0, 1)),
        Button.DOWN: Matrix4((1, 0, 0, 0, 0, c, s, 0, 0, -s, c, 0, 0, 0, 0, 1)),
        Button.RIGHT: Matrix4((c, 0, -s, 0, 0, 1, 0, 0, s, 0, c, 0, 0, 0, 0, 1)),
        Button.LEFT: Matrix4((c, 0, s, 0, 0, 1, 0, 0, -s, 0, c, 0, 0, 0, 0, 1)),
        Button.A: Matrix4((c, s, 0, 0, -s, c, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)),
        Button.B: Matrix4((c, -s, 0, 0, s, c, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)),
    }


def _closed_pairs(corners: Sequence[Any]) -> zip:
    return zip(corners, [*corners[1:], corners[0]])


class CubeScene:
    """State of the spinning cube and the rendering of one frame."""

    def __init__(self) -> None:
        self.points: list[tuple[float, float, float]] = list(CUBE_POINTS)
        self.spin = DEFAULT_SPIN
        self.inverted = False
        self.background = Color.WHITE
        self.line_color = Color.BLACK
        self.fill = False
        self.backfaces = False
        self.view = make_view_matrix(EYE, TARGET, UP, WIDTH, HEIGHT)
        self.rotations = rotation_matrices(self.spin)
        self.projected: list[tuple[int, int]] = []
        self.project()

    def project(self) -> list[tuple[int, int]]:
        """Project the cube's corners to integer screen coordinates."""
        projected = []
        for x, y, z in self.points:
            h = self.view.transform(Vector4(x, y, z, 1.0))
            projected.append((int(h.x / h.w), int(h.y / h.w)))
        self.projected = projected
        return projected

    def is_front_facing(self, square: Sequence[int]) -> bool:
        corners = [self.projected[i] for i in square]
        total = sum((a[0] - b[0]) * (a[1] + b[1]) for a, b in _closed_pairs(corners))
        return total > 0

    def face_normals(self) -> list[Vector3]:
        normals = []
        for square in SQUARES:
            p0, p1, p2 = (self.points[i] for i in square[:3])
            first = Vector3(*subtract(p1, p0))
            second = Vector3(*subtract(p2, p1))
            normals.append(first.cross(second).normalized())
        return normals

    def rotate(self, buttons: Button | int) -> None:
        """Apply the rotation of every pressed button, then re-project."""
        buttons = Button(buttons)
        if not buttons:
            return
        for button, matrix in self.rotations.items():
            if buttons & button:
                self.points = [
                    tuple(matrix.transform(Vector4(x, y, z, 1.0)))[:3]
                    for x, y, z in self.points
                ]
        self.project()

    def turn_crank(self, change: float) -> None:
        if change == 0:
            return
        self.spin += SPIN_STEP if change > 0 else -SPIN_STEP
        self.spin = min(max(self.spin, MIN_SPIN), MAX_SPIN)
        self.rotations = rotation_matrices(self.spin)

    def speed_label(self) -> str:
        return f"Rotation Speed:  {int(self.spin * RADIAN_TO_DEGREE)}"

    def toggle_inverted(self) -> bool:
        self.inverted = not self.inverted
        if self.inverted:
            self.background, self.line_color = Color.BLACK, Color.WHITE
        else:
            self.background, self.line_color = Color.WHITE, Color.BLACK
        return self.inverted

    def toggle_fill(self) -> bool:
        self.fill = not self.fill
        return self.fill

    def toggle_backfaces(self) -> bool:
        self.backfaces = not self.backfaces
        return self.backfaces

    def draw_square(self, canvas: Canvas, square: Sequence[int], edges: bool, color: Color) -> None:
        if not (self.backfaces or self.is_front_facing(square)):
            return
        corners = [self.projected[i] for i in square]
        if edges:
            for (x1, y1), (x2, y2) in _closed_pairs(corners):
                canvas.draw_line(x1, y1, x2, y2, LINE_WIDTH, color)
        else:
            canvas.fill_polygon(corners, color)

    def update(self, canvas: Canvas, crank: float = 0.0, buttons: Button | int = Button(0)) -> None:
        """Advance the scene by one frame and draw it onto ``canvas``."""
        canvas.clear(self.background)
        canvas.draw_text(self.speed_label(), *TEXT_POSITION)
        self.turn_crank(crank)
        self.rotate(buttons)
        edge_color = self.line_color
        if self.fill:
            for square in SQUARES:
                self.draw_square(canvas, square, False, self.line_color)
            edge_color = self.background
        for square in SQUARES:
            self.draw_square(canvas, square, True, edge_color)