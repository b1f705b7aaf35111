"""
Record types for Norwegian counties and municipalities.

Both record types are frozen dataclasses: once the data has been loaded,
nothing can modify a record, so records can be handed out to callers and
shared between threads without copying.
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple


# Official written-language standards of a municipality's administration
BOKMAL = "Bokmål"
NYNORSK = "Nynorsk"
NEUTRAL = "Nøytral"

LANGUAGE_FORMS: Tuple[str, ...] = (BOKMAL, NYNORSK, NEUTRAL)

# Length of the numeric identifiers
COUNTY_ID_LENGTH = 2
MUNICIPALITY_ID_LENGTH = 4


@dataclass(frozen=True)
class County:
    """A county (fylke), the first-level administrative division."""

    id: str
    """Two-digit county number, e.g. "03" for Oslo."""

    name: str
    """County name."""

    url: str
    """County website URL."""

    # Column names in the bundled data file, in field order
    FIELDS = ("f_id", "f_name", "f_url")

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "County":
        """Build a county from a row ordered as FIELDS."""
        f_id, f_name, f_url = row
        return cls(id=f_id, name=f_name, url=f_url)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "f_id": self.id,
            "f_name": self.name,
            "f_url": self.url,
        }


@dataclass(frozen=True)
class Municipality:
    """
    A municipality (kommune), nested within a county.

    The first two digits of the municipality number are the number of the
    county it belongs to.
    """

    id: str
    """Four-digit municipality number, e.g. "0301" for Oslo."""

    name: str
    """Official name, possibly including Sami or Kven forms."""

    name_no: str
    """Norwegian name."""

    adm_center: str
    """Administrative center."""

    population: int
    """Population count."""

    area: float
    """Area in square kilometers."""

    language: str
    """Official language form, one of LANGUAGE_FORMS."""

    url: str
    """Municipality website URL."""

    FIELDS = (
        "k_id",
        "k_name",
        "k_name_no",
        "k_adm_center",
        "k_population",
        "k_area",
        "k_language",
        "k_url",
    )

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Municipality":
        """Build a municipality from a row ordered as FIELDS."""
        k_id, k_name, k_name_no, k_adm_center, k_population, k_area, k_language, k_url = row
        return cls(
            id=k_id,
            name=k_name,
            name_no=k_name_no,
            adm_center=k_adm_center,
            population=int(k_population),
            area=float(k_area),
            language=k_language,
            url=k_url,
        )

    @property
    def county_id(self) -> str:
        """Number of the county this municipality belongs to."""
        return self.id[:COUNTY_ID_LENGTH]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "k_id": self.id,
            "k_name": self.name,
            "k_name_no": self.name_no,
            "k_adm_center": self.adm_center,
            "k_population": self.population,
            "k_area": self.area,
            "k_language": self.language,
            "k_url": self.url,
        }
