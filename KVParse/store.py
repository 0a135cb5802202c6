"""
Keyword/value store for KVParse.

The Store maps each keyword to the ordered list of raw value strings that were
supplied for it. All values are kept as strings; type conversion happens only
when a value is requested through the accessors.
"""

import copy
import sys
from typing import Dict, Iterator, List, Optional, TextIO, Tuple

from KVParse.exceptions import MissingKeywordError


class Store:
    """
    Mapping from keyword to an ordered list of raw values.

    A keyword that is present always has at least one value; removing the
    last value of a keyword removes the keyword itself. Keywords compare by
    exact, case-sensitive equality and are iterated in insertion order.
    """

    def __init__(self) -> None:
        self._db: Dict[str, List[str]] = {}

    def clear(self) -> None:
        """Erase all stored configuration data."""
        self._db.clear()

    def add_value(self, keyword: str, value: str) -> int:
        """
        Append a value to a keyword, creating the keyword if needed.

        Args:
            keyword: The keyword to add to
            value: The raw value string

        Returns:
            int: The number of values now stored for the keyword
        """
        values = self._db.setdefault(keyword, [])
        values.append(value)
        return len(values)

    def remove_value(self, keyword: str, value: str) -> int:
        """
        Remove the first occurrence of a value from a keyword.

        If the keyword or the value is not present nothing changes. If the
        removal leaves the keyword with no values, the keyword is dropped.

        Args:
            keyword: The keyword to remove from
            value: The raw value string to remove

        Returns:
            int: The number of values left for the keyword; 0 if the keyword
            or value was absent or the keyword was removed
        """
        values = self._db.get(keyword)
        if values is None or value not in values:
            return 0

        values.remove(value)
        if not values:
            del self._db[keyword]
            return 0
        return len(values)

    def keyword_exists(self, keyword: str) -> bool:
        """Return True if the keyword has at least one value."""
        return keyword in self._db

    def has_unique_value(self, keyword: str) -> bool:
        """Return True if the keyword exists and has exactly one value."""
        return len(self._db.get(keyword, ())) == 1

    def values(self, keyword: str) -> List[str]:
        """
        Return a copy of all values stored for a keyword.

        Raises:
            MissingKeywordError: If the keyword does not exist
        """
        if keyword not in self._db:
            raise MissingKeywordError(f"keyword '{keyword}' not specified", keyword=keyword)
        return list(self._db[keyword])

    def value(self, keyword: str) -> str:
        """
        Return the single value of a keyword.

        Returns an empty string when the keyword has more than one value.

        Raises:
            MissingKeywordError: If the keyword does not exist
        """
        values = self.values(keyword)
        if len(values) != 1:
            return ""
        return values[0]

    def keywords(self) -> List[str]:
        return list(self._db)

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for keyword, values in self._db.items():
            yield keyword, list(values)

    def as_dict(self) -> Dict[str, List[str]]:
        """Return a deep copy of the keyword to values mapping."""
        return copy.deepcopy(self._db)

    def dump(self, sink: Optional[TextIO] = None) -> None:
        """
        Write every keyword and its values to a text sink for debugging.

        One line per keyword, in insertion order::

            Keyword: <keyword>  |  Values: <v1> <v2>

        Args:
            sink: A writable text stream (default: sys.stdout)
        """
        if sink is None:
            sink = sys.stdout
        for keyword, values in self._db.items():
            sink.write(f"Keyword: {keyword}  |  Values: ")
            for value in values:
                sink.write(f"{value} ")
            sink.write("\n")

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._db

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._db))

    def __len__(self) -> int:
        return len(self._db)

    def __repr__(self) -> str:
        return f"Store({self._db})"
