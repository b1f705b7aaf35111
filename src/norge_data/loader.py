"""
DuckDB-based loader for the bundled county and municipality tables.

The data files are JSON arrays of flat objects. They are read with DuckDB's
read_json with every column kept as JSON, and the JSON type of each value is
checked before it is converted. A record with a missing field or a value of
the wrong kind (e.g. a number where the id string belongs) is rejected while
reading instead of surfacing later as a broken lookup.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple, Type, TypeVar, Union
import logging

import duckdb

from .models import County, Municipality


logger = logging.getLogger(__name__)

# Bundled data directory (shipped as package data)
DEFAULT_DATA_DIR = Path(__file__).parent / "data"

COUNTIES_FILE = "fylker-2025.json"
MUNICIPALITIES_FILE = "kommuner-2025.json"

# Value kinds: accepted JSON types (as reported by json_type) and the SQL
# expression converting a JSON value of that kind
STRING = "string"
INTEGER = "integer"
NUMBER = "number"

KIND_JSON_TYPES: Dict[str, FrozenSet[str]] = {
    STRING: frozenset({"VARCHAR"}),
    INTEGER: frozenset({"UBIGINT", "BIGINT"}),
    NUMBER: frozenset({"UBIGINT", "BIGINT", "DOUBLE"}),
}

KIND_CONVERSIONS: Dict[str, str] = {
    STRING: "json_extract_string({col}, '$')",
    INTEGER: "CAST({col} AS BIGINT)",
    NUMBER: "CAST({col} AS DOUBLE)",
}

# Value kind of each column, in record field order
COUNTY_COLUMNS: Dict[str, str] = dict(zip(County.FIELDS, (STRING, STRING, STRING)))

MUNICIPALITY_COLUMNS: Dict[str, str] = dict(zip(
    Municipality.FIELDS,
    (STRING, STRING, STRING, STRING, INTEGER, NUMBER, STRING, STRING),
))

RecordT = TypeVar("RecordT", County, Municipality)


class DataLoadError(Exception):
    """Raised when a bundled data file is missing or malformed."""


@dataclass
class LoaderConfig:
    """Configuration for locating the data files."""

    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    """Directory containing both data files."""

    counties_file: str = COUNTIES_FILE
    """File name of the county table."""

    municipalities_file: str = MUNICIPALITIES_FILE
    """File name of the municipality table."""

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)
        for name in (self.counties_file, self.municipalities_file):
            if not name:
                raise ValueError("data file names must be non-empty")
            if not name.endswith(".json"):
                raise ValueError(f"data file must be a .json file: {name}")

    @property
    def counties_path(self) -> Path:
        return self.data_dir / self.counties_file

    @property
    def municipalities_path(self) -> Path:
        return self.data_dir / self.municipalities_file


def _columns_literal(columns: Dict[str, str]) -> str:
    """Render a schema reading every column as raw JSON."""
    entries = ", ".join(f"'{name}': 'JSON'" for name in columns)
    return "{" + entries + "}"


def _select_list(columns: Dict[str, str]) -> str:
    """Select the JSON type of every column, then its converted value."""
    type_exprs = [f"json_type({name})" for name in columns]
    value_exprs = []
    for name, kind in columns.items():
        accepted = ", ".join(f"'{t}'" for t in sorted(KIND_JSON_TYPES[kind]))
        conversion = KIND_CONVERSIONS[kind].format(col=name)
        value_exprs.append(
            f"CASE WHEN json_type({name}) IN ({accepted}) THEN {conversion} END"
        )
    return ", ".join(type_exprs + value_exprs)


def read_table(path: Path, columns: Dict[str, str]) -> List[tuple]:
    """
    Read a JSON array file into rows, preserving source order.

    Args:
        path: Path to the JSON file
        columns: Mapping of column name -> value kind (STRING, INTEGER, NUMBER)

    Returns:
        List of row tuples with values ordered as in ``columns``

    Raises:
        DataLoadError: If the file is missing, unreadable, empty, has a
            missing or null field, or has a value of the wrong JSON type
    """
    path = Path(path)
    if not path.is_file():
        raise DataLoadError(f"Data file not found: {path}")

    escaped_path = str(path).replace("'", "''")

    con = duckdb.connect(":memory:")
    try:
        con.execute("SET preserve_insertion_order = true")
        results = con.execute(f"""
            SELECT {_select_list(columns)}
            FROM read_json(
                '{escaped_path}',
                format = 'array',
                columns = {_columns_literal(columns)}
            )
        """).fetchall()
    except duckdb.Error as e:
        raise DataLoadError(f"Could not read {path}: {e}") from e
    finally:
        con.close()

    if not results:
        raise DataLoadError(f"Data file contains no records: {path}")

    width = len(columns)
    rows = []
    for index, result in enumerate(results):
        json_types, values = result[:width], result[width:]
        for (name, kind), json_type in zip(columns.items(), json_types):
            if json_type is None or json_type == "NULL":
                raise DataLoadError(
                    f"Record {index} in {path} is missing field '{name}'"
                )
            if json_type not in KIND_JSON_TYPES[kind]:
                raise DataLoadError(
                    f"Record {index} in {path} has field '{name}' of JSON type "
                    f"{json_type}, expected {kind}"
                )
        rows.append(tuple(values))

    return rows


def _load_records(
    path: Path,
    columns: Dict[str, str],
    record_type: Type[RecordT],
) -> Tuple[RecordT, ...]:
    rows = read_table(path, columns)
    records = tuple(record_type.from_row(row) for row in rows)
    logger.debug("Loaded %d %s records from %s", len(records), record_type.__name__, path)
    return records


def load_counties(path: Optional[Union[str, Path]] = None) -> Tuple[County, ...]:
    """
    Load the county table.

    Args:
        path: Path to the county JSON file (default: bundled file)

    Returns:
        Tuple of counties in source order
    """
    if path is None:
        path = DEFAULT_DATA_DIR / COUNTIES_FILE
    return _load_records(Path(path), COUNTY_COLUMNS, County)


def load_municipalities(
    path: Optional[Union[str, Path]] = None,
) -> Tuple[Municipality, ...]:
    """
    Load the municipality table.

    Args:
        path: Path to the municipality JSON file (default: bundled file)

    Returns:
        Tuple of municipalities in source order
    """
    if path is None:
        path = DEFAULT_DATA_DIR / MUNICIPALITIES_FILE
    return _load_records(Path(path), MUNICIPALITY_COLUMNS, Municipality)
