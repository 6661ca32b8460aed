from __future__ import annotations

from dataclasses import dataclass

from facetplot.geometry import Extent


RGBA = tuple[int, int, int, int]


class Drawable:
    """Immutable node of a composed scene. Subclasses report their extent."""

    @property
    def extent(self) -> Extent:
        raise NotImplementedError

    def translate(self, x: float = 0.0, y: float = 0.0) -> "Drawable":
        if x == 0 and y == 0:
            return self
        return Translate(child=self, x=x, y=y)

    def resize(self, extent: Extent) -> "Drawable":
        if extent == self.extent:
            return self
        return Resize(child=self, size=extent)

    def behind(self, other: "Drawable") -> "Group":
        """Stack `other` on top of this drawable, flattening nested groups."""
        return Group.of(self, other)


@dataclass(frozen=True)
class EmptyDrawable(Drawable):
    size: Extent = Extent(0.0, 0.0)

    @property
    def extent(self) -> Extent:
        return self.size


@dataclass(frozen=True)
class FilledRect(Drawable):
    width: float
    height: float
    color: RGBA

    @property
    def extent(self) -> Extent:
        return Extent(self.width, self.height)


@dataclass(frozen=True)
class StrokedRect(Drawable):
    width: float
    height: float
    color: RGBA
    line_width: float = 1.0

    @property
    def extent(self) -> Extent:
        return Extent(self.width, self.height)


@dataclass(frozen=True)
class Disc(Drawable):
    radius: float
    color: RGBA

    @property
    def extent(self) -> Extent:
        return Extent(2 * self.radius, 2 * self.radius)


@dataclass(frozen=True)
class Text(Drawable):
    text: str
    size: Extent
    color: RGBA
    font_family: str
    font_size_px: float
    rotate_deg: int = 0

    @property
    def extent(self) -> Extent:
        return self.size


@dataclass(frozen=True)
class Translate(Drawable):
    """Offsets a child; `extent` is its far corner measured from the parent origin."""

    child: Drawable
    x: float
    y: float

    @property
    def extent(self) -> Extent:
        inner = self.child.extent
        return Extent(max(0.0, inner.width + self.x), max(0.0, inner.height + self.y))

    def translate(self, x: float = 0.0, y: float = 0.0) -> Drawable:
        return Translate(child=self.child, x=self.x + x, y=self.y + y)


@dataclass(frozen=True)
class Resize(Drawable):
    child: Drawable
    size: Extent

    @property
    def extent(self) -> Extent:
        return self.size


@dataclass(frozen=True)
class Group(Drawable):
    """Layers drawn in order; later layers sit above earlier ones."""

    layers: tuple[Drawable, ...] = ()

    @classmethod
    def of(cls, *items: Drawable) -> "Group":
        flat: list[Drawable] = []
        for item in items:
            if isinstance(item, Group):
                flat.extend(item.layers)
            else:
                flat.append(item)
        return cls(layers=tuple(flat))

    @property
    def extent(self) -> Extent:
        if not self.layers:
            return Extent(0.0, 0.0)
        width = max(layer.extent.width for layer in self.layers)
        height = max(layer.extent.height for layer in self.layers)
        return Extent(width, height)
