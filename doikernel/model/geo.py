from __future__ import annotations
from collections.abc import Iterable, Mapping
import dataclasses
import decimal
import typing

from doikernel import exceptions as kernel_exceptions


type Coordinate = float | int | str


@dataclasses.dataclass(frozen=True)
class Point:
    longitude: Coordinate | None
    latitude: Coordinate | None

    @property
    def is_complete(self) -> bool:
        return self.longitude is not None and self.latitude is not None


@dataclasses.dataclass(frozen=True)
class Box:
    west_bound_longitude: Coordinate | None
    east_bound_longitude: Coordinate | None
    south_bound_latitude: Coordinate | None
    north_bound_latitude: Coordinate | None

    @property
    def is_complete(self) -> bool:
        return None not in (
            self.west_bound_longitude,
            self.east_bound_longitude,
            self.south_bound_latitude,
            self.north_bound_latitude,
        )


@dataclasses.dataclass(frozen=True)
class Polygon:
    points: tuple[Point, ...]
    in_polygon_point: Point | None = None

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(self.points))
        for _point in self.points:
            if not (isinstance(_point, Point) and _point.is_complete):
                raise kernel_exceptions.InvalidGeoShape(f'polygon point lacks a coordinate: {_point!r}')


type GeoShape = Point | Box | Polygon


@dataclasses.dataclass(frozen=True)
class GeoLocation:
    shape: GeoShape | None
    place: str | None = None

    @classmethod
    def from_fields(
        cls,
        *,
        place: str | None = None,
        point_longitude: typing.Any = None,
        point_latitude: typing.Any = None,
        west_bound_longitude: typing.Any = None,
        east_bound_longitude: typing.Any = None,
        south_bound_latitude: typing.Any = None,
        north_bound_latitude: typing.Any = None,
        polygon_points: Iterable[Mapping[str, typing.Any]] | None = None,
        in_polygon_point_longitude: typing.Any = None,
        in_polygon_point_latitude: typing.Any = None,
    ) -> typing.Self:
        return cls(
            shape=geo_shape_from_fields(
                point_longitude=point_longitude,
                point_latitude=point_latitude,
                west_bound_longitude=west_bound_longitude,
                east_bound_longitude=east_bound_longitude,
                south_bound_latitude=south_bound_latitude,
                north_bound_latitude=north_bound_latitude,
                polygon_points=polygon_points,
                in_polygon_point_longitude=in_polygon_point_longitude,
                in_polygon_point_latitude=in_polygon_point_latitude,
            ),
            place=(place or None),
        )


def geo_shape_from_fields(
    *,
    point_longitude: typing.Any = None,
    point_latitude: typing.Any = None,
    west_bound_longitude: typing.Any = None,
    east_bound_longitude: typing.Any = None,
    south_bound_latitude: typing.Any = None,
    north_bound_latitude: typing.Any = None,
    polygon_points: Iterable[Mapping[str, typing.Any]] | None = None,
    in_polygon_point_longitude: typing.Any = None,
    in_polygon_point_latitude: typing.Any = None,
) -> GeoShape | None:
    '''collapse stored nullable geolocation columns into (at most) one shape

    >>> geo_shape_from_fields(point_longitude=13.06, point_latitude=52.38)
    Point(longitude=13.06, latitude=52.38)
    >>> geo_shape_from_fields() is None
    True

    partial shapes and mixed shapes are rejected here, not at render time
    >>> geo_shape_from_fields(west_bound_longitude=1, east_bound_longitude=2)
    Traceback (most recent call last):
      ...
    doikernel.exceptions.InvalidGeoShape: incomplete bounding box: ...
    '''
    _point_fields = (point_longitude, point_latitude)
    _box_fields = (west_bound_longitude, east_bound_longitude, south_bound_latitude, north_bound_latitude)
    _polygon_fields = tuple(polygon_points or ())
    _given = [
        _shape_name
        for _shape_name, _has_fields in (
            ('point', _any_given(_point_fields)),
            ('box', _any_given(_box_fields)),
            ('polygon', bool(_polygon_fields)),
        )
        if _has_fields
    ]
    if len(_given) > 1:
        raise kernel_exceptions.InvalidGeoShape(f'ambiguous geolocation, has fields for {" and ".join(_given)}')
    if not _given:
        return None
    (_shape_name,) = _given
    if _shape_name == 'point':
        _point = Point(*map(_coordinate, _point_fields))
        if not _point.is_complete:
            raise kernel_exceptions.InvalidGeoShape(f'incomplete point: {_point!r}')
        return _point
    if _shape_name == 'box':
        _box = Box(*map(_coordinate, _box_fields))
        if not _box.is_complete:
            raise kernel_exceptions.InvalidGeoShape(f'incomplete bounding box: {_box!r}')
        return _box
    _in_polygon_point = (
        Point(_coordinate(in_polygon_point_longitude), _coordinate(in_polygon_point_latitude))
        if _any_given((in_polygon_point_longitude, in_polygon_point_latitude))
        else None
    )
    return Polygon(
        points=tuple(_polygon_point(_raw_point) for _raw_point in _polygon_fields),
        in_polygon_point=_in_polygon_point,
    )


###
# local helpers

def _any_given(values: Iterable[typing.Any]) -> bool:
    return any(_value is not None for _value in values)


def _coordinate(value: typing.Any) -> Coordinate | None:
    if isinstance(value, decimal.Decimal):
        return float(value)
    return value


def _polygon_point(raw_point: Mapping[str, typing.Any]) -> Point:
    try:
        return Point(
            longitude=_coordinate(raw_point['longitude']),
            latitude=_coordinate(raw_point['latitude']),
        )
    except (KeyError, TypeError) as exc:
        raise kernel_exceptions.InvalidGeoShape(f'malformed polygon point: {raw_point!r}') from exc
