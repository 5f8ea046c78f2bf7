"""Route catalog loader: reads routes.yaml and provides read-only example routes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from .models import RoutePoint
from .path import GeoPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarathonRoute:
    """A named route from the catalog."""

    id: str
    name: str
    path: GeoPath
    description: str = ""
    start_location: str | None = None
    finish_location: str | None = None
    total_distance: float = 0.0  # miles, as published
    elevation_gain: int = 0  # feet


class RouteCatalog:
    """
    Loads and provides access to example routes from YAML.

    Instances are read-only once loaded and are passed explicitly to
    whatever needs example data.
    """

    def __init__(self, content_dir: Path):
        self.content_dir = content_dir
        self._routes: tuple[MarathonRoute, ...] | None = None

    @property
    def yaml_path(self) -> Path:
        return self.content_dir / "routes" / "routes.yaml"

    def load(self) -> tuple[MarathonRoute, ...]:
        """Load catalog from routes.yaml."""
        if not self.yaml_path.exists():
            logger.warning(f"Route catalog not found: {self.yaml_path}")
            self._routes = ()
            return self._routes

        with open(self.yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        routes = tuple(self._parse_route(r) for r in data.get("routes", []))
        logger.info(f"Loaded {len(routes)} routes from {self.yaml_path}")

        self._routes = routes
        return routes

    @staticmethod
    def _parse_route(data: dict) -> MarathonRoute:
        path = GeoPath(
            RoutePoint(
                longitude=float(p["lon"]),
                latitude=float(p["lat"]),
                distance=float(p["mile"]),
                elevation=p.get("elevation"),
                landmark=p.get("landmark"),
            )
            for p in data.get("points", [])
        )

        total = data.get("total_distance")
        gain = data.get("elevation_gain")

        return MarathonRoute(
            id=data["id"],
            name=data["name"],
            path=path,
            description=data.get("description", ""),
            start_location=data.get("start_location"),
            finish_location=data.get("finish_location"),
            total_distance=float(total) if total is not None else path.total_distance(),
            elevation_gain=int(gain) if gain is not None else path.elevation_gain(),
        )

    @property
    def routes(self) -> tuple[MarathonRoute, ...]:
        if self._routes is None:
            self.load()
        return self._routes or ()

    def get_route(self, route_id: str) -> MarathonRoute | None:
        return next((r for r in self.routes if r.id == route_id), None)

    def route_ids(self) -> list[str]:
        return [r.id for r in self.routes]
