"""Domain entities for logistics and routing."""

from dataclasses import dataclass


@dataclass
class Place:
    name: str
    address: str | None = None
    lat: float | None = None
    lon: float | None = None
    type: str | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lon is not None


@dataclass
class Route:
    distance_km: float
    duration_min: int
    status: str


@dataclass
class TrafficAdvice:
    destination: str
    traffic_status: str
    advice: str
    hour: int


@dataclass
class ParsedTask:
    """A logistics task extracted from free text ("pick up parcel at 6pm")."""

    title: str
    destination: str | None = None
    time: str | None = None
    notes: str | None = None
