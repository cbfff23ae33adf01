"""Saving search results to JSON files."""

import json
import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Union

from sglocate.models import LocationRecord

logger = logging.getLogger(__name__)

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9]")


def filename_for(query: str) -> str:
    """
    Derive the results file name for *query*.

    Every non-alphanumeric character becomes an underscore, e.g.
    'Plaza Singapura' -> 'addresses_plaza_singapura.json'.
    """
    return f"addresses_{_UNSAFE_CHARS_RE.sub('_', query).lower()}.json"


def save_records(
    query: str,
    records: Iterable[LocationRecord],
    directory: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """
    Write *records* as an indented JSON array next to other saved queries.

    An existing file with the same name is overwritten. Write failures
    are logged, not raised; the return value is then None.
    """
    path = Path(directory or Path.cwd()) / filename_for(query)
    data = [record.to_dict() for record in records]
    try:
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as exc:
        logger.error(f"Error saving addresses to file: {exc}")
        return None
    logger.info(f"Addresses saved to {path.name}.")
    return path


def load_records(path: Union[str, Path]) -> list[LocationRecord]:
    """Read a file written by save_records() back into records."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return [LocationRecord.from_dict(item) for item in data]
