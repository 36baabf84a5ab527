"""
CSV loading service

Reads the three report inputs into typed rows. Missing files are fatal to the
report run; malformed rows are passed through and judged by the report
service.
"""
import csv
from pathlib import Path
from typing import Dict, List, Type, TypeVar, Union

from pydantic import BaseModel

from core.exceptions import ReportSourceNotFound
from schemas import PlayerRow, EventRow, RsvpRow

RowT = TypeVar("RowT", bound=BaseModel)


def load_csv(path: Union[str, Path]) -> List[Dict[str, str]]:
    """
    Read a CSV file with a header row into a list of dicts

    Raises:
        ReportSourceNotFound: the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise ReportSourceNotFound(path)

    with open(path, newline='', encoding='utf-8') as csvfile:
        return list(csv.DictReader(csvfile))


def load_rows(path: Union[str, Path], row_type: Type[RowT]) -> List[RowT]:
    rows = []
    for raw in load_csv(path):
        # DictReader files surplus cells under the None key
        cleaned = {key.strip(): value for key, value in raw.items() if key is not None}
        rows.append(row_type.model_validate(cleaned))
    return rows


def load_players(path: Union[str, Path]) -> List[PlayerRow]:
    return load_rows(path, PlayerRow)


def load_events(path: Union[str, Path]) -> List[EventRow]:
    return load_rows(path, EventRow)


def load_rsvps(path: Union[str, Path]) -> List[RsvpRow]:
    return load_rows(path, RsvpRow)
