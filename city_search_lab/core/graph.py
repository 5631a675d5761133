# city_search_lab/core/graph.py
# Immutable city/road graph: lookup, neighbors, edge and path costs, and loading from a JSON
# document (validated with pydantic models before the graph is built).
from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field, StrictStr, ValidationError, field_validator

from .errors import GraphDataError, InvariantViolation

CityId = str


class CityCategory(str, enum.Enum):
    CAPITAL = "capital"
    ECONOMIC_CENTER = "economic-center"


# "capitol" and "dec" are the spellings used in older city files
_CATEGORY_ALIASES = {
    "capital": CityCategory.CAPITAL,
    "capitol": CityCategory.CAPITAL,
    "economic-center": CityCategory.ECONOMIC_CENTER,
    "dec": CityCategory.ECONOMIC_CENTER,
}


@dataclass(frozen=True)
class City:
    id: CityId
    category: CityCategory
    lat: float
    lon: float


@dataclass(frozen=True)
class Road:
    source: CityId
    target: CityId
    distance: float


@dataclass(frozen=True)
class Neighbor:
    id: CityId
    distance: float


class Graph:
    """
    Undirected weighted graph of cities.

    - neighbors(c): every city sharing a road with c, in road order
    - edge_cost(a, b): road distance, either orientation
    - city_by_id(c): City or None (callers must handle absence)
    - path_cost(path): sum of road distances along the path
    """

    def __init__(self, cities: Iterable[City], roads: Iterable[Road]):
        self._cities: Dict[CityId, City] = {}
        for city in cities:
            if city.id in self._cities:
                raise GraphDataError(f"duplicate city id {city.id!r}")
            self._cities[city.id] = city

        self._roads: Tuple[Road, ...] = tuple(roads)
        self._adj: Dict[CityId, List[Neighbor]] = {cid: [] for cid in self._cities}
        self._cost: Dict[frozenset, float] = {}
        for road in self._roads:
            for end in (road.source, road.target):
                if end not in self._cities:
                    raise GraphDataError(
                        f"road {road.source!r} -> {road.target!r} references unknown city {end!r}"
                    )
            if road.source == road.target:
                raise GraphDataError(f"road from {road.source!r} to itself")
            key = frozenset((road.source, road.target))
            if key in self._cost:
                raise GraphDataError(f"duplicate road between {road.source!r} and {road.target!r}")
            self._cost[key] = road.distance
            self._adj[road.source].append(Neighbor(road.target, road.distance))
            self._adj[road.target].append(Neighbor(road.source, road.distance))

    # ---- lookup ---------------------------------------------------------------
    def __contains__(self, city_id: object) -> bool:
        return city_id in self._cities

    def __len__(self) -> int:
        return len(self._cities)

    @property
    def cities(self) -> Tuple[City, ...]:
        return tuple(self._cities.values())

    @property
    def roads(self) -> Tuple[Road, ...]:
        return self._roads

    def city_by_id(self, city_id: CityId) -> Optional[City]:
        return self._cities.get(city_id)

    def city(self, city_id: CityId) -> City:
        try:
            return self._cities[city_id]
        except KeyError:
            raise KeyError(f"unknown city {city_id!r}") from None

    def capitals(self) -> List[City]:
        return self._by_category(CityCategory.CAPITAL)

    def economic_centers(self) -> List[City]:
        return self._by_category(CityCategory.ECONOMIC_CENTER)

    def _by_category(self, category: CityCategory) -> List[City]:
        return sorted((c for c in self._cities.values() if c.category is category), key=lambda c: c.id)

    # ---- structure ------------------------------------------------------------
    def neighbors(self, city_id: CityId) -> List[Neighbor]:
        return list(self._adj.get(city_id, ()))

    def has_edge(self, a: CityId, b: CityId) -> bool:
        return frozenset((a, b)) in self._cost

    def edge_cost(self, a: CityId, b: CityId) -> float:
        try:
            return self._cost[frozenset((a, b))]
        except KeyError:
            raise InvariantViolation(f"no road between {a!r} and {b!r}") from None

    def path_cost(self, path: Sequence[CityId]) -> float:
        total = 0.0
        for a, b in zip(path, path[1:]):
            total += self.edge_cost(a, b)
        return total

    def __repr__(self) -> str:
        return f"Graph(cities={len(self._cities)}, roads={len(self._roads)})"


# ---- loading ------------------------------------------------------------------

def _plain_number(v: Any) -> Any:
    # bool is an int subclass and "12" would be coerced; neither is a coordinate or a distance
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError(f"must be a number, got {v!r}")
    return v


Number = Annotated[float, Field(allow_inf_nan=False), BeforeValidator(_plain_number)]
Name = Annotated[StrictStr, Field(min_length=1)]


class CityModel(BaseModel):
    id: Name
    category: CityCategory = Field(validation_alias=AliasChoices("type", "category"))
    lat: Number = Field(ge=-90, le=90)
    lon: Number = Field(ge=-180, le=180)

    @field_validator("category", mode="before")
    @classmethod
    def _known_category(cls, v):
        category = _CATEGORY_ALIASES.get(v) if isinstance(v, str) else None
        if category is None:
            raise ValueError(f"unknown category {v!r}")
        return category


class RoadModel(BaseModel):
    source: Name
    target: Name
    distance: Number = Field(ge=0)


class GraphDocument(BaseModel):
    nodes: List[CityModel]
    links: List[RoadModel]


def _describe(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        where = "".join(f"[{p}]" if isinstance(p, int) else f".{p}" for p in e["loc"]).lstrip(".")
        parts.append(f"{where or 'document'}: {e['msg']}")
    return "invalid graph document: " + "; ".join(parts)


def graph_from_dict(doc: Any) -> Graph:
    """Validate a {"nodes": [...], "links": [...]} document and build the graph from it."""
    try:
        parsed = GraphDocument.model_validate(doc)
    except ValidationError as e:
        raise GraphDataError(_describe(e)) from e
    cities = [City(c.id, c.category, c.lat, c.lon) for c in parsed.nodes]
    roads = [Road(r.source, r.target, r.distance) for r in parsed.links]
    return Graph(cities, roads)


def load_graph(path: str | Path) -> Graph:
    path = Path(path)
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise GraphDataError(f"cannot read graph file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise GraphDataError(f"{path} is not valid JSON: {e}") from e
    return graph_from_dict(doc)
