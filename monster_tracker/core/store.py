from __future__ import annotations

from typing import Iterator, List, Optional, Union

from .errors import ValidationError
from .monster import Monster, parse_int

RecordRef = Union[Monster, int]


class MonsterStore:
    """
    Ordered, in-memory collection of monster records.

    Records carry no identifier; they are addressed by position. Validation
    happens before any mutation so a rejected call leaves the store untouched.
    """

    BLANK_FIELDS_MESSAGE = "Fill in the name and the life!"
    INVALID_LIFE_MESSAGE = "Life should be a positive integer number!"
    INVALID_AMOUNT_MESSAGE = "Enter an integer (positive or negative)"

    def __init__(self) -> None:
        self._records: List[Monster] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Monster]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Monster:
        return self._records[index]

    @property
    def is_empty(self) -> bool:
        return not self._records

    def is_valid_index(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._records)

    def lines(self) -> List[str]:
        return [record.display_text() for record in self._records]

    def create(self, name: str, life: str) -> Monster:
        name_text = (name or "").strip()
        life_text = (life or "").strip()
        if not name_text or not life_text:
            raise ValidationError(self.BLANK_FIELDS_MESSAGE)
        value = parse_int(life_text)
        if value is None or value <= 0:
            raise ValidationError(self.INVALID_LIFE_MESSAGE)
        record = Monster(name_text, value)
        self._records.append(record)
        return record

    def adjust_life(self, record: RecordRef, delta: str) -> Monster:
        target = self._resolve(record)
        amount = parse_int(delta)
        if amount is None:
            raise ValidationError(self.INVALID_AMOUNT_MESSAGE)
        target.change_life(amount)
        return target

    def remove(self, index: int) -> Monster:
        if not self.is_valid_index(index):
            raise IndexError(f"no monster at index {index}")
        return self._records.pop(index)

    def clear(self) -> None:
        self._records.clear()

    def clone(self, record: RecordRef, new_name: Optional[str]) -> Optional[Monster]:
        """Append a renamed copy. A missing or blank name cancels and returns None."""
        source = self._resolve(record)
        if new_name is None or not new_name.strip():
            return None
        copied = source.renamed(new_name)
        self._records.append(copied)
        return copied

    def _resolve(self, record: RecordRef) -> Monster:
        if isinstance(record, Monster):
            return record
        if not self.is_valid_index(record):
            raise IndexError(f"no monster at index {record}")
        return self._records[record]
