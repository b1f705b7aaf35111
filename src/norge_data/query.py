"""
Query functions over a DataStore.

All functions are pure reads: they scan the store's tuples in source order
and return either a single record (or None when nothing matches) or a new
list of records. Name comparisons are case-insensitive, identifier
comparisons are exact.
"""

from typing import List, Optional, Union

from .models import County, Municipality, MUNICIPALITY_ID_LENGTH
from .store import DataStore


# Short municipality number, e.g. "301", "0301" or 301
ShortId = Union[str, int]


def get_all_counties(store: DataStore) -> List[County]:
    """Get all counties in source order."""
    return list(store.counties)


def get_all_municipalities(store: DataStore) -> List[Municipality]:
    """Get all municipalities in source order."""
    return list(store.municipalities)


def get_county_by_id(store: DataStore, county_id: str) -> Optional[County]:
    """
    Get a county by its two-digit number.

    Args:
        store: Data store
        county_id: County number, e.g. "03"

    Returns:
        The county, or None if not found
    """
    for county in store.counties:
        if county.id == county_id:
            return county
    return None


def get_county_by_name(store: DataStore, name: str) -> Optional[County]:
    """Get a county by name (case-insensitive)."""
    wanted = name.lower()
    for county in store.counties:
        if county.name.lower() == wanted:
            return county
    return None


def get_municipality_by_id(
    store: DataStore, municipality_id: str
) -> Optional[Municipality]:
    """
    Get a municipality by its four-digit number.

    Args:
        store: Data store
        municipality_id: Municipality number, e.g. "0301"

    Returns:
        The municipality, or None if not found
    """
    for municipality in store.municipalities:
        if municipality.id == municipality_id:
            return municipality
    return None


def get_municipality_by_name(store: DataStore, name: str) -> Optional[Municipality]:
    """
    Get a municipality by name (case-insensitive).

    Matches either the official name or the Norwegian name, so both
    "Guovdageaidnu - Kautokeino" and "Kautokeino" find the same record.
    """
    wanted = name.lower()
    for municipality in store.municipalities:
        if (
            municipality.name.lower() == wanted
            or municipality.name_no.lower() == wanted
        ):
            return municipality
    return None


def _normalize_short_id(short_id: ShortId) -> str:
    """Convert a short id to a digit string without leading zeros."""
    return str(short_id).lstrip("0")


def _is_subsequence(needle: str, haystack: str) -> bool:
    """Check whether the characters of needle appear in order in haystack."""
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


def get_municipality_by_short_id(
    store: DataStore, short_id: ShortId
) -> Optional[Municipality]:
    """
    Get a municipality by a short form of its number (1-4 digits).

    Matching is tried in three steps, each over the whole table in source
    order:

    1. the id padded with zeros to four digits, e.g. "301" -> "0301";
    2. the id compared with municipality numbers stripped of leading zeros;
    3. the digits of the id appearing in order within a municipality
       number, e.g. "31" matches "0301".

    The last step is permissive: short ambiguous input resolves to the
    first matching municipality in source order, which need not belong to
    the county the digits suggest ("42" matches "3242", not an Agder
    municipality).

    Args:
        store: Data store
        short_id: Municipality number as a string or integer

    Returns:
        The municipality, or None if not found
    """
    search_id = _normalize_short_id(short_id)

    padded_id = search_id.rjust(MUNICIPALITY_ID_LENGTH, "0")
    exact_match = get_municipality_by_id(store, padded_id)
    if exact_match is not None:
        return exact_match

    for municipality in store.municipalities:
        if municipality.id.lstrip("0") == search_id:
            return municipality

    for municipality in store.municipalities:
        if _is_subsequence(search_id, municipality.id):
            return municipality

    return None


def get_municipalities_by_language(store: DataStore, language: str) -> List[Municipality]:
    """
    Get municipalities with the given language form (case-insensitive).

    Args:
        store: Data store
        language: "Bokmål", "Nynorsk" or "Nøytral"

    Returns:
        Matching municipalities in source order
    """
    wanted = language.lower()
    return [m for m in store.municipalities if m.language.lower() == wanted]


def get_municipalities_in_county(store: DataStore, county_id: str) -> List[Municipality]:
    """Get the municipalities whose number starts with the county number."""
    return [m for m in store.municipalities if m.id.startswith(county_id)]


def get_county_for_municipality(
    store: DataStore, municipality: Municipality
) -> Optional[County]:
    """Get the county a municipality belongs to."""
    return get_county_by_id(store, municipality.county_id)


def get_municipalities_by_population(
    store: DataStore, min_population: float, max_population: float
) -> List[Municipality]:
    """
    Get municipalities with a population in [min_population, max_population].

    Pass math.inf as max_population for an open-ended range.
    """
    return [
        m for m in store.municipalities
        if min_population <= m.population <= max_population
    ]


def get_municipalities_by_area(
    store: DataStore, min_area: float, max_area: float
) -> List[Municipality]:
    """
    Get municipalities with an area (km²) in [min_area, max_area].

    Pass math.inf as max_area for an open-ended range.
    """
    return [m for m in store.municipalities if min_area <= m.area <= max_area]


def search_municipalities_by_name(store: DataStore, fragment: str) -> List[Municipality]:
    """
    Search municipalities by partial name (case-insensitive).

    Matches against both the official and the Norwegian name. An empty
    fragment matches every municipality.
    """
    term = fragment.lower()
    return [
        m for m in store.municipalities
        if term in m.name.lower() or term in m.name_no.lower()
    ]


def search_counties_by_name(store: DataStore, fragment: str) -> List[County]:
    """Search counties by partial name (case-insensitive)."""
    term = fragment.lower()
    return [c for c in store.counties if term in c.name.lower()]
