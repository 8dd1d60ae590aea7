# core/geometry.py
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """2D coordinate, used both for canvas positions and pin-local offsets."""
    x: float
    y: float

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> 'Point':
        return Point(self.x * factor, self.y * factor)

    def __truediv__(self, factor: float) -> 'Point':
        return Point(self.x / factor, self.y / factor)


def clamp_scale(scale: float) -> float:
    return max(ViewTransform.MIN_SCALE, min(ViewTransform.MAX_SCALE, scale))


@dataclass(frozen=True)
class ViewTransform:
    """
    Maps model (canvas) coordinates to screen coordinates:
        screen = model * scale + offset
    The scale is clamped to [MIN_SCALE, MAX_SCALE] on construction, so no
    instance can ever hold an out-of-range zoom level.
    """
    MIN_SCALE = 0.1
    MAX_SCALE = 3.0
    ZOOM_FACTOR = 1.1

    scale: float = 1.0
    offset: Point = field(default_factory=lambda: Point(0, 0))

    def __post_init__(self):
        object.__setattr__(self, "scale", clamp_scale(float(self.scale)))

    def to_model(self, screen: Point) -> Point:
        """Inverse transform: the model point displayed at a screen position."""
        return (screen - self.offset) / self.scale

    def to_screen(self, model: Point) -> Point:
        return model * self.scale + self.offset

    def zoomed_at(self, pointer: Point, zoom_in: bool, factor: float = ZOOM_FACTOR) -> 'ViewTransform':
        """
        Zooms one step around the pointer. The model point under the pointer
        before the zoom stays under the pointer afterwards.
        """
        anchor = self.to_model(pointer)
        new_scale = clamp_scale(self.scale * factor if zoom_in else self.scale / factor)
        return ViewTransform(new_scale, pointer - anchor * new_scale)

    def panned_by(self, dx: float, dy: float) -> 'ViewTransform':
        """Shifts the offset by a raw screen-space delta."""
        return ViewTransform(self.scale, self.offset + Point(dx, dy))
