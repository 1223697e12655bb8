"""Pydantic geometry models for jurisdiction boundaries and reported coordinates.

Two coordinate orderings coexist in this domain:

- ``GeoPoint`` is what GPS hardware and map widgets report (latitude first).
- ``Position`` is the GeoJSON ``(lng, lat)`` pair that rings are stored in.

They are deliberately distinct types. Convert with ``to_position`` /
``to_geo_point`` rather than building one from the other's fields.
"""

from typing import Annotated, Literal, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Position(NamedTuple):
    """GeoJSON-ordered coordinate pair: longitude first."""
    lng: float
    lat: float

    def to_geo_point(self) -> "GeoPoint":
        return GeoPoint(latitude=self.lat, longitude=self.lng)


class GeoPoint(BaseModel):
    """A reported WGS84 location in degrees."""
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    def to_position(self) -> Position:
        return Position(lng=self.longitude, lat=self.latitude)


def to_position(point: GeoPoint) -> Position:
    return point.to_position()


def to_geo_point(position: Position) -> GeoPoint:
    return position.to_geo_point()


class Ring(BaseModel):
    """One loop of a polygon.

    Closed (first == last) and unclosed rings are both accepted; the
    duplicated closing vertex is dropped so ``positions`` holds the logical
    vertices only. Degenerate rings (fewer than 3 vertices) are legal values.
    """
    model_config = ConfigDict(frozen=True)

    positions: tuple[Position, ...] = ()

    @field_validator("positions")
    @classmethod
    def drop_closing_vertex(cls, v: tuple[Position, ...]) -> tuple[Position, ...]:
        if len(v) > 1 and v[0] == v[-1]:
            return v[:-1]
        return v

    @classmethod
    def from_coordinates(cls, coordinates) -> "Ring":
        """Build a ring from GeoJSON-style ``[[lng, lat], ...]`` pairs."""
        return cls(positions=tuple(Position(float(c[0]), float(c[1])) for c in coordinates))

    @property
    def is_degenerate(self) -> bool:
        return len(set(self.positions)) < 3

    def edges(self):
        """Yield ``(start, end)`` pairs for every edge, including the closing one."""
        n = len(self.positions)
        if n < 2:
            return
        for i in range(n):
            yield self.positions[i], self.positions[(i + 1) % n]


class Polygon(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Polygon"] = "Polygon"
    outer: Ring
    holes: tuple[Ring, ...] = ()


class MultiPolygon(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["MultiPolygon"] = "MultiPolygon"
    polygons: tuple[Polygon, ...] = Field(min_length=1)


# The administrative jurisdiction assigned to an agent.
Boundary = Annotated[Union[Polygon, MultiPolygon], Field(discriminator="type")]


class BoundingBox(BaseModel):
    """Axis-aligned extent of a boundary. A pre-filter, never a containment test."""
    model_config = ConfigDict(frozen=True)

    north: float
    south: float
    east: float
    west: float

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(
            latitude=(self.north + self.south) / 2,
            longitude=(self.east + self.west) / 2,
        )
