"""
Settings registry for KVParse.

This module implements the Settings class, the handle client programs hold
on to: it owns a Store and exposes parsing, mutation and typed access as
methods.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TextIO, Union

from KVParse import accessor, parser
from KVParse.accessor import LookupResult, ValueType
from KVParse.store import Store
from KVParse.utils.logging import get_logger


class Settings:
    """
    A configuration registry backed by a single Store.

    Instances are independent of each other. Programs that want one
    registry per process can use get_settings(); tests usually create their
    own instance.

    Examples:
        >>> settings = Settings()
        >>> settings.read_configuration_file("run.cfg")
        >>> generations = settings.get_integer("generations", required=True)
        >>> rate = settings.get_double("mutation_rate", default=0.01)
    """

    def __init__(self, store: Optional[Store] = None) -> None:
        self.store = store if store is not None else Store()
        self.logger = get_logger(__name__)

    # Parsing and mutation

    def clear(self) -> None:
        """Reset to the initial empty state."""
        self.store.clear()
        self.logger.debug("Cleared all settings")

    def parse(self, source: str, lines: Iterable[str]) -> bool:
        """
        Parse lines from an already opened source.

        Args:
            source: Name of the source, used only in error messages
            lines: The lines to parse. A single str is rejected with
                TypeError; pass text to parse_string instead.

        Returns:
            bool: True; errors are raised
        """
        added = parser.parse_lines(self.store, source, lines)
        self.logger.info(f"Loaded {added} entries from {source}")
        return True

    def parse_string(self, text: str, source: str = "<string>") -> bool:
        """Parse configuration text held in memory, split into lines like a file."""
        added = parser.parse_string(self.store, text, source)
        self.logger.info(f"Loaded {added} entries from {source}")
        return True

    def read_configuration_file(self, path: Union[str, Path]) -> bool:
        return parser.read_configuration_file(self.store, path)

    def add_value(self, keyword: str, value: str) -> int:
        return self.store.add_value(keyword, value)

    def remove_value(self, keyword: str, value: str) -> int:
        return self.store.remove_value(keyword, value)

    # Queries

    def keyword_exists(self, keyword: str) -> bool:
        return self.store.keyword_exists(keyword)

    def has_unique_value(self, keyword: str) -> bool:
        return self.store.has_unique_value(keyword)

    def values(self, keyword: str) -> List[str]:
        return self.store.values(keyword)

    def value(self, keyword: str) -> str:
        return self.store.value(keyword)

    def get_string(self, keyword: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
        return accessor.get_string(self.store, keyword, default, required)

    def get_integer(self, keyword: str, default: Optional[int] = None, required: bool = False) -> Optional[int]:
        return accessor.get_integer(self.store, keyword, default, required)

    def get_unsigned(self, keyword: str, default: Optional[int] = None, required: bool = False) -> Optional[int]:
        return accessor.get_unsigned(self.store, keyword, default, required)

    def get_double(self, keyword: str, default: Optional[float] = None, required: bool = False) -> Optional[float]:
        return accessor.get_double(self.store, keyword, default, required)

    def get_boolean(self, keyword: str, default: Optional[bool] = None, required: bool = False) -> Optional[bool]:
        return accessor.get_boolean(self.store, keyword, default, required)

    def get_list(self, keyword: str, default: Optional[List[str]] = None,
                 required: bool = False) -> Optional[List[str]]:
        return accessor.get_list(self.store, keyword, default, required)

    def get_vector(self, keyword: str, item_type: ValueType = ValueType.STRING,
                   default: Optional[List[Any]] = None, required: bool = False) -> Optional[List[Any]]:
        return accessor.get_vector(self.store, keyword, item_type, default, required)

    def get(self, keyword: str, value_type: ValueType, default: Any = None,
            required: bool = False, item_type: ValueType = ValueType.STRING) -> Any:
        return accessor.get(self.store, keyword, value_type, default, required, item_type)

    def lookup(self, keyword: str, value_type: ValueType, required: bool = False,
               item_type: ValueType = ValueType.STRING) -> LookupResult:
        return accessor.lookup(self.store, keyword, value_type, required, item_type)

    # Output

    def dump(self, sink: Optional[TextIO] = None) -> None:
        """Print every keyword and its values, one keyword per line."""
        self.store.dump(sink if sink is not None else sys.stdout)

    def as_dict(self) -> Dict[str, List[str]]:
        return self.store.as_dict()

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.store

    def __len__(self) -> int:
        return len(self.store)


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the process-wide default Settings instance.

    The instance is created empty on first use and shared afterwards.

    Returns:
        Settings: The default Settings instance

    Examples:
        >>> from KVParse import get_settings
        >>> get_settings().read_configuration_file("run.cfg")
        >>> seed = get_settings().get_unsigned("seed", default=0)
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = Settings()
    return _default_settings
