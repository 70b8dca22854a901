"""Types and commands for geospatial indexes."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from redcmd.command import Command, cmd, to_redis_args

T = TypeVar("T")


def _type_error(value: Any, detail: str) -> TypeError:
    return TypeError(
        f"Response was of incompatible type: {detail} (response was {value!r})"
    )


def _to_string(value: Any) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise _type_error(value, "Invalid UTF-8") from exc
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise _type_error(value, "Response type not string compatible.")


def _to_float(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, (bytes, bytearray, memoryview, str)):
        text = _to_string(value)
        try:
            return float(text)
        except ValueError as exc:
            raise _type_error(value, "Could not convert from string.") from exc
    raise _type_error(value, "Response type not float compatible.")


class Unit(enum.Enum):
    """Distance units used by GEODIST and GEORADIUS."""

    METERS = "m"
    KILOMETERS = "km"
    MILES = "mi"
    FEET = "ft"

    def to_redis_args(self) -> list[bytes]:
        return [self.value.encode()]


@dataclass(frozen=True)
class Coord(Generic[T]):
    """A (longitude, latitude) coordinate."""

    longitude: T
    latitude: T

    @classmethod
    def lon_lat(cls, longitude: T, latitude: T) -> Coord[T]:
        """Create a coordinate from longitude and latitude."""
        return cls(longitude, latitude)

    @classmethod
    def from_value(
        cls, value: Any, convert: Callable[[Any], T] = _to_float  # type: ignore[assignment]
    ) -> Coord[T]:
        """Read a coordinate from a reply holding exactly two items."""
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise _type_error(value, "Expect a pair of numbers")
        longitude, latitude = value
        return cls(convert(longitude), convert(latitude))

    def to_redis_args(self) -> list[bytes]:
        return to_redis_args(self.longitude) + to_redis_args(self.latitude)

    def is_single_arg(self) -> bool:
        return False


class RadiusOrder(enum.Enum):
    """How GEORADIUS sorts its results."""

    UNSORTED = "UNSORTED"
    ASC = "ASC"
    DESC = "DESC"


class RadiusOptions:
    """Options for GEORADIUS and GEORADIUSBYMEMBER; each setter returns new options."""

    __slots__ = ("_with_coord", "_with_dist", "_count", "_order", "_store", "_store_dist")

    def __init__(self) -> None:
        self._with_coord = False
        self._with_dist = False
        self._count: int | None = None
        self._order = RadiusOrder.UNSORTED
        self._store: list[bytes] | None = None
        self._store_dist: list[bytes] | None = None

    def _copy(self) -> RadiusOptions:
        copy = RadiusOptions()
        for name in self.__slots__:
            setattr(copy, name, getattr(self, name))
        return copy

    def limit(self, n: int) -> RadiusOptions:
        """Limit the results to the first n matching items."""
        if n < 0:
            raise ValueError("limit must not be negative")
        copy = self._copy()
        copy._count = n
        return copy

    def with_dist(self) -> RadiusOptions:
        """Return the distance of each item from the center."""
        copy = self._copy()
        copy._with_dist = True
        return copy

    def with_coord(self) -> RadiusOptions:
        """Return the coordinates of each item."""
        copy = self._copy()
        copy._with_coord = True
        return copy

    def order(self, o: RadiusOrder) -> RadiusOptions:
        """Sort the returned items."""
        copy = self._copy()
        copy._order = RadiusOrder(o)
        return copy

    def store(self, key: Any) -> RadiusOptions:
        """Store the results in a sorted set at key instead of returning them."""
        copy = self._copy()
        copy._store = to_redis_args(key)
        return copy

    def store_dist(self, key: Any) -> RadiusOptions:
        """Store the results at key, scored by distance from the center."""
        copy = self._copy()
        copy._store_dist = to_redis_args(key)
        return copy

    def to_redis_args(self) -> list[bytes]:
        args: list[bytes] = []
        if self._with_coord:
            args.append(b"WITHCOORD")
        if self._with_dist:
            args.append(b"WITHDIST")
        if self._count is not None:
            args.extend((b"COUNT", str(self._count).encode()))
        if self._order is not RadiusOrder.UNSORTED:
            args.append(self._order.value.encode())
        if self._store is not None:
            args.append(b"STORE")
            args.extend(self._store)
        if self._store_dist is not None:
            args.append(b"STOREDIST")
            args.extend(self._store_dist)
        return args

    def is_single_arg(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RadiusOptions):
            return NotImplemented
        return self.to_redis_args() == other.to_redis_args()

    def __repr__(self) -> str:
        return f"RadiusOptions({b' '.join(self.to_redis_args())!r})"


@dataclass(frozen=True)
class RadiusSearchResult:
    """An item returned by GEORADIUS or GEORADIUSBYMEMBER."""

    name: str
    coord: Coord[float] | None = None
    dist: float | None = None

    @classmethod
    def from_value(cls, value: Any) -> RadiusSearchResult:
        """Read a result that is either a bare name or [name, dist?, coord?]."""
        try:
            return cls(_to_string(value))
        except TypeError:
            pass
        if isinstance(value, (list, tuple)):
            result = cls._from_items(value)
            if result is not None:
                return result
        raise _type_error(value, "Response type not RadiusSearchResult compatible.")

    @classmethod
    def _from_items(cls, items: Sequence[Any]) -> RadiusSearchResult | None:
        rest = iter(items)
        try:
            name = _to_string(next(rest))
        except (StopIteration, TypeError):
            return None
        current = next(rest, None)
        dist: float | None = None
        if current is not None:
            try:
                dist = _to_float(current)
            except TypeError:
                pass
            else:
                current = next(rest, None)
        coord: Coord[float] | None = None
        if current is not None:
            try:
                coord = Coord.from_value(current)
            except TypeError:
                coord = None
        return cls(name, coord, dist)


def geo_add(key: Any, members: Any) -> Command:
    """Add (longitude, latitude, member) items to a geospatial index."""
    return cmd("GEOADD").arg(key).arg(members)


def geo_dist(key: Any, member1: Any, member2: Any, unit: Unit) -> Command:
    """Return the distance between two members."""
    return cmd("GEODIST").arg(key).arg(member1).arg(member2).arg(unit)


def geo_hash(key: Any, members: Any) -> Command:
    """Return Geohash strings for one or more members."""
    return cmd("GEOHASH").arg(key).arg(members)


def geo_pos(key: Any, members: Any) -> Command:
    """Return the positions of one or more members."""
    return cmd("GEOPOS").arg(key).arg(members)


def geo_radius(
    key: Any,
    longitude: float,
    latitude: float,
    radius: float,
    unit: Unit,
    options: RadiusOptions,
) -> Command:
    """Return the members within a radius of a point."""
    return (
        cmd("GEORADIUS")
        .arg(key)
        .arg(float(longitude))
        .arg(float(latitude))
        .arg(float(radius))
        .arg(unit)
        .arg(options)
    )


def geo_radius_by_member(
    key: Any, member: Any, radius: float, unit: Unit, options: RadiusOptions
) -> Command:
    """Return the members within a radius of another member."""
    return (
        cmd("GEORADIUSBYMEMBER")
        .arg(key)
        .arg(member)
        .arg(float(radius))
        .arg(unit)
        .arg(options)
    )