"""
Combined accessor exposing both tables and every query on one object.
"""

from typing import List, Optional, Tuple

from . import query
from .loader import LoaderConfig
from .models import County, Municipality
from .query import ShortId
from .store import DataStore, default_store, load_store


class NorgeData:
    """
    Both reference tables and all queries, bound to a single DataStore.

    Methods mirror the functions in norge_data.query without the store
    argument.
    """

    def __init__(self, store: DataStore):
        self._store = store

    @property
    def store(self) -> DataStore:
        return self._store

    @property
    def counties(self) -> Tuple[County, ...]:
        return self._store.counties

    @property
    def municipalities(self) -> Tuple[Municipality, ...]:
        return self._store.municipalities

    def get_all_counties(self) -> List[County]:
        return query.get_all_counties(self._store)

    def get_all_municipalities(self) -> List[Municipality]:
        return query.get_all_municipalities(self._store)

    def get_county_by_id(self, county_id: str) -> Optional[County]:
        return query.get_county_by_id(self._store, county_id)

    def get_county_by_name(self, name: str) -> Optional[County]:
        return query.get_county_by_name(self._store, name)

    def get_municipality_by_id(self, municipality_id: str) -> Optional[Municipality]:
        return query.get_municipality_by_id(self._store, municipality_id)

    def get_municipality_by_name(self, name: str) -> Optional[Municipality]:
        return query.get_municipality_by_name(self._store, name)

    def get_municipality_by_short_id(self, short_id: ShortId) -> Optional[Municipality]:
        return query.get_municipality_by_short_id(self._store, short_id)

    def get_municipalities_by_language(self, language: str) -> List[Municipality]:
        return query.get_municipalities_by_language(self._store, language)

    def get_municipalities_in_county(self, county_id: str) -> List[Municipality]:
        return query.get_municipalities_in_county(self._store, county_id)

    def get_county_for_municipality(self, municipality: Municipality) -> Optional[County]:
        return query.get_county_for_municipality(self._store, municipality)

    def get_municipalities_by_population(
        self, min_population: float, max_population: float
    ) -> List[Municipality]:
        return query.get_municipalities_by_population(
            self._store, min_population, max_population
        )

    def get_municipalities_by_area(self, min_area: float, max_area: float) -> List[Municipality]:
        return query.get_municipalities_by_area(self._store, min_area, max_area)

    def search_municipalities_by_name(self, fragment: str) -> List[Municipality]:
        return query.search_municipalities_by_name(self._store, fragment)

    def search_counties_by_name(self, fragment: str) -> List[County]:
        return query.search_counties_by_name(self._store, fragment)

    def __repr__(self) -> str:
        return f"NorgeData({self._store!r})"


def load(config: Optional[LoaderConfig] = None) -> NorgeData:
    """
    Load the data files and bind them to a new accessor.

    Args:
        config: Loader configuration (default: bundled data files)

    Returns:
        A NorgeData instance over a freshly loaded store
    """
    return NorgeData(load_store(config))


def default() -> NorgeData:
    """Get an accessor over the process-wide default store."""
    return NorgeData(default_store())
