from typing import Iterable, List

from .record import Record


def clean_records(records: Iterable[Record]) -> List[Record]:
    """Keep only records that carry a residential type, in their original order."""
    return [record for record in records if record.residential_type is not None]
