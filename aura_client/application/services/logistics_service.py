"""Application service (use case) for the logistics screen."""

import asyncio
import logging
from dataclasses import dataclass, field

from aura_client.application.interfaces import LogisticsApi
from aura_client.application.services.result import capture
from aura_client.domain.entities import ParsedTask, Place, Route, TrafficAdvice

logger = logging.getLogger(__name__)


@dataclass
class LogisticsState:
    places: list[Place] = field(default_factory=list)
    traffic_advice: TrafficAdvice | None = None


class LogisticsService:
    """Place search, traffic advice and routing. Depends on the LogisticsApi port (DI).

    A failed refresh keeps whatever the screen already shows.
    """

    def __init__(self, api: LogisticsApi, default_destination: str = "work"):
        self._api = api
        self._default_destination = default_destination
        self.state = LogisticsState()

    async def load(self) -> LogisticsState:
        result = await capture(
            self._api.get_traffic_advice(self._default_destination),
            operation="Load traffic advice",
        )
        if result.ok:
            self.state.traffic_advice = result.value
        return self.state

    async def search(
        self, query: str, lat: float | None = None, lon: float | None = None
    ) -> LogisticsState:
        query = query.strip()
        if not query:
            return self.state
        places, advice = await asyncio.gather(
            capture(self._api.search_place(query, lat, lon), operation="Search places"),
            capture(self._api.get_traffic_advice(query), operation="Load traffic advice"),
        )
        if places.ok:
            self.state.places = places.value_or([])
        if advice.ok:
            self.state.traffic_advice = advice.value
        return self.state

    async def route(self, origin: Place, destination: Place, transport: str = "car") -> Route | None:
        if not (origin.has_coordinates and destination.has_coordinates):
            logger.warning("Route requested between places without coordinates")
            return None
        result = await capture(
            self._api.get_route(
                origin.lat, origin.lon, destination.lat, destination.lon, transport
            ),
            operation="Build route",
        )
        return result.value

    async def parse_task(self, text: str) -> ParsedTask | None:
        if not text.strip():
            return None
        result = await capture(self._api.parse_task(text.strip()), operation="Parse task")
        return result.value
