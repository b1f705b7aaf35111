"""
Immutable in-memory store holding both reference tables.

A DataStore is built once and then passed to the query functions. It only
holds tuples of frozen records, so it is safe to share between threads.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from .loader import LoaderConfig, load_counties, load_municipalities
from .models import County, Municipality


@dataclass(frozen=True)
class DataStore:
    """Counties and municipalities, in source order."""

    counties: Tuple[County, ...]
    municipalities: Tuple[Municipality, ...]

    def __post_init__(self):
        # Accept any sequence, store tuples
        object.__setattr__(self, "counties", tuple(self.counties))
        object.__setattr__(self, "municipalities", tuple(self.municipalities))

    def __repr__(self) -> str:
        return (
            f"DataStore(counties={len(self.counties)}, "
            f"municipalities={len(self.municipalities)})"
        )


def load_store(config: Optional[LoaderConfig] = None) -> DataStore:
    """
    Load both tables into a new store.

    Args:
        config: Loader configuration (default: bundled data files)

    Returns:
        A new DataStore

    Raises:
        DataLoadError: If either data file is missing or malformed
    """
    config = config or LoaderConfig()
    return DataStore(
        counties=load_counties(config.counties_path),
        municipalities=load_municipalities(config.municipalities_path),
    )


@lru_cache(maxsize=None)
def default_store() -> DataStore:
    """Get the process-wide store built from the bundled data files."""
    return load_store()
