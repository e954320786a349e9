# app/events.py
from dataclasses import dataclass, field


# Business events handed to the Recorder; plain data so sinks can serialize them.
@dataclass
class FacilityOpened:
    facility_id: str
    x: int
    y: int
    prices: dict[str, float] = field(default_factory=dict)


@dataclass
class QueryMatch:
    facility_id: str
    medication: str
    price: float
    distance: int


@dataclass
class QueryAnswered:
    x: int
    y: int
    k: int
    matches: list[QueryMatch] = field(default_factory=list)
