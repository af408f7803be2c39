"""Popular city shortcuts shown under the search box."""

from __future__ import annotations

from .schemas import CityCard

POPULAR_CITIES: tuple[CityCard, ...] = (
    CityCard(name="New York", country="US"),
    CityCard(name="Los Angeles", country="US"),
    CityCard(name="Tokyo", country="Japan"),
    CityCard(name="Paris", country="France"),
    CityCard(name="London", country="UK"),
    CityCard(name="Sydney", country="Australia"),
)


def find_city(name: str) -> CityCard:
    wanted = name.strip().casefold()
    for city in POPULAR_CITIES:
        if city.name.casefold() == wanted:
            return city
    raise KeyError(f"Unknown city: {name}")
