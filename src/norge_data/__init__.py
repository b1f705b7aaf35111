"""
norge-data: Norwegian counties (fylker) and municipalities (kommuner).

This package bundles the 2025 county and municipality tables and provides
lookup, filter and search functions over them.
"""

__version__ = "0.1.0"

from .models import County, Municipality, LANGUAGE_FORMS
from .loader import DataLoadError, LoaderConfig, load_counties, load_municipalities
from .store import DataStore, load_store, default_store
from .query import (
    ShortId,
    get_all_counties,
    get_all_municipalities,
    get_county_by_id,
    get_county_by_name,
    get_municipality_by_id,
    get_municipality_by_name,
    get_municipality_by_short_id,
    get_municipalities_by_language,
    get_municipalities_in_county,
    get_county_for_municipality,
    get_municipalities_by_population,
    get_municipalities_by_area,
    search_municipalities_by_name,
    search_counties_by_name,
)
from .api import NorgeData, load, default

__all__ = [
    "County",
    "Municipality",
    "LANGUAGE_FORMS",
    "DataLoadError",
    "LoaderConfig",
    "load_counties",
    "load_municipalities",
    "DataStore",
    "load_store",
    "default_store",
    "ShortId",
    "get_all_counties",
    "get_all_municipalities",
    "get_county_by_id",
    "get_county_by_name",
    "get_municipality_by_id",
    "get_municipality_by_name",
    "get_municipality_by_short_id",
    "get_municipalities_by_language",
    "get_municipalities_in_county",
    "get_county_for_municipality",
    "get_municipalities_by_population",
    "get_municipalities_by_area",
    "search_municipalities_by_name",
    "search_counties_by_name",
    "NorgeData",
    "load",
    "default",
]
