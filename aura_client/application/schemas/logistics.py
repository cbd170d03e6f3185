"""Pydantic v2 schemas (DTOs) for the logistics endpoints."""

from pydantic import BaseModel, Field


class PlaceSchema(BaseModel):
    name: str
    address: str | None = None
    lat: float | None = None
    lon: float | None = None
    type: str | None = None


class PlaceSearchResponse(BaseModel):
    results: list[PlaceSchema]


class RouteRequest(BaseModel):
    from_lat: float
    from_lon: float
    to_lat: float
    to_lon: float
    transport: str = "car"


class RouteSchema(BaseModel):
    distance_km: float
    duration_min: int
    status: str


class TrafficAdviceSchema(BaseModel):
    destination: str
    traffic_status: str
    advice: str
    hour: int


class ParseTaskRequest(BaseModel):
    text: str = Field(..., min_length=1)


class ParsedTaskSchema(BaseModel):
    title: str
    destination: str | None = None
    time: str | None = None
    notes: str | None = None
