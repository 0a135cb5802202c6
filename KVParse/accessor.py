"""
Typed access to values held in a Store.

Every getter follows the same contract:

- keyword absent and ``required`` -> MissingKeywordError
- keyword absent and not ``required`` -> ``default`` is returned unchanged
- scalar requested for a keyword with several values -> AmbiguousKeywordError
- value not matching the grammar of the requested type -> IllegalValueError

``lookup`` wraps the same logic in a LookupResult for callers that prefer to
branch on the outcome instead of catching exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from KVParse.defaults import (
    DOUBLE_RE, FALSE_VALUES, INTEGER_RE, QUOTE, TRUE_VALUES, UNSIGNED_RE,
)
from KVParse.exceptions import (
    AmbiguousKeywordError, ConfigSyntaxError, IllegalValueError, KVParseError,
    MissingKeywordError,
)
from KVParse.store import Store


class ValueType(Enum):
    """The closed set of types a value can be requested as."""
    STRING = "string"
    INTEGER = "integer"
    UNSIGNED = "unsigned"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    LIST = "list"
    VECTOR = "vector"


class LookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of a lookup: a value, a missing optional keyword, or an error.

    Attributes:
        keyword: The keyword that was looked up
        status: Which of the three outcomes occurred
        value: The converted value when status is FOUND
        error: The exception describing the failure when status is ERROR
    """
    keyword: str
    status: LookupStatus
    value: Any = None
    error: Optional[KVParseError] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def unwrap(self, default: Any = None) -> Any:
        """Return the value, ``default`` if not found, or raise the error."""
        if self.status is LookupStatus.ERROR:
            raise self.error
        if self.status is LookupStatus.NOT_FOUND:
            return default
        return self.value


# Conversion of single raw strings. These know nothing about the Store and
# are shared by the scalar getters and get_vector.

def convert_string(keyword: str, raw: str) -> str:
    """Strip one pair of surrounding double quotes, if present."""
    if raw == QUOTE:
        raise ConfigSyntaxError(f"unterminated quote in value of keyword '{keyword}'", keyword=keyword)
    if len(raw) >= 2 and raw.startswith(QUOTE) and raw.endswith(QUOTE):
        return raw[1:-1]
    return raw


def convert_integer(keyword: str, raw: str) -> int:
    if INTEGER_RE.fullmatch(raw) is None:
        raise IllegalValueError(
            f"illegal value '{raw}' for integer keyword '{keyword}'", keyword=keyword)
    return int(raw, 10)


def convert_unsigned(keyword: str, raw: str) -> int:
    if UNSIGNED_RE.fullmatch(raw) is None:
        raise IllegalValueError(
            f"illegal value '{raw}' for unsigned integer keyword '{keyword}'", keyword=keyword)
    return int(raw, 10)


def convert_double(keyword: str, raw: str) -> float:
    if DOUBLE_RE.fullmatch(raw) is None:
        raise IllegalValueError(
            f"illegal value '{raw}' for double keyword '{keyword}'", keyword=keyword)
    try:
        return float(raw)
    except ValueError as e:
        # The grammar admits digit-less strings such as "", "." and "-"
        raise IllegalValueError(
            f"illegal value '{raw}' for double keyword '{keyword}'", keyword=keyword, cause=e) from e


def convert_boolean(keyword: str, raw: str) -> bool:
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    allowed = ",".join(f"'{v}'" for v in TRUE_VALUES + FALSE_VALUES)
    raise IllegalValueError(
        f"illegal value for keyword '{keyword}' specified. Must be one of {allowed}", keyword=keyword)


CONVERTERS: Dict[ValueType, Callable[[str, str], Any]] = {
    ValueType.STRING: convert_string,
    ValueType.INTEGER: convert_integer,
    ValueType.UNSIGNED: convert_unsigned,
    ValueType.DOUBLE: convert_double,
    ValueType.BOOLEAN: convert_boolean,
}


def keyword_exists(store: Store, keyword: str) -> bool:
    return store.keyword_exists(keyword)


def has_unique_value(store: Store, keyword: str) -> bool:
    return store.has_unique_value(keyword)


def _unique_value(store: Store, keyword: str) -> str:
    if not store.has_unique_value(keyword):
        raise AmbiguousKeywordError(
            f"keyword '{keyword}' is ambiguous; multiple values", keyword=keyword)
    return store.value(keyword)


def _missing(keyword: str) -> MissingKeywordError:
    return MissingKeywordError(f"required keyword '{keyword}' not specified", keyword=keyword)


def _get_scalar(store: Store, keyword: str, value_type: ValueType, default: Any, required: bool) -> Any:
    if not store.keyword_exists(keyword):
        if required:
            raise _missing(keyword)
        return default
    return CONVERTERS[value_type](keyword, _unique_value(store, keyword))


def get_string(store: Store, keyword: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """
    Get the value of a keyword as a string.

    A value wrapped in double quotes has the quotes removed; any other
    quotes are preserved. A value consisting of a single '"' is rejected.
    """
    return _get_scalar(store, keyword, ValueType.STRING, default, required)


def get_integer(store: Store, keyword: str, default: Optional[int] = None, required: bool = False) -> Optional[int]:
    """Get the value of a keyword as a base-10 integer."""
    return _get_scalar(store, keyword, ValueType.INTEGER, default, required)


def get_unsigned(store: Store, keyword: str, default: Optional[int] = None, required: bool = False) -> Optional[int]:
    """Get the value of a keyword as a non-negative integer. A '-' sign is illegal."""
    return _get_scalar(store, keyword, ValueType.UNSIGNED, default, required)


def get_double(store: Store, keyword: str, default: Optional[float] = None, required: bool = False) -> Optional[float]:
    return _get_scalar(store, keyword, ValueType.DOUBLE, default, required)


def get_boolean(store: Store, keyword: str, default: Optional[bool] = None, required: bool = False) -> Optional[bool]:
    return _get_scalar(store, keyword, ValueType.BOOLEAN, default, required)


def get_list(store: Store, keyword: str, default: Optional[List[str]] = None,
             required: bool = False) -> Optional[List[str]]:
    """Get every raw value of a keyword in the order they were added."""
    if not store.keyword_exists(keyword):
        if required:
            raise _missing(keyword)
        return default
    return store.values(keyword)


def get_vector(store: Store, keyword: str, item_type: ValueType = ValueType.STRING,
               default: Optional[List[Any]] = None, required: bool = False) -> Optional[List[Any]]:
    """
    Split the single value of a keyword on whitespace and convert each token.

    Args:
        store: The Store to read from
        keyword: The keyword to look up
        item_type: Scalar type of each token
        default: Returned unchanged if the keyword is absent and not required
        required: Whether a missing keyword is an error

    Returns:
        The converted tokens; an empty value gives an empty list

    Raises:
        MissingKeywordError: If required and the keyword is absent
        AmbiguousKeywordError: If the keyword has more than one value
        IllegalValueError: If any token is invalid for item_type
    """
    if item_type not in CONVERTERS:
        raise ValueError(f"unsupported vector item type: {item_type}")
    if not store.keyword_exists(keyword):
        if required:
            raise _missing(keyword)
        return default

    convert = CONVERTERS[item_type]
    return [convert(keyword, token) for token in _unique_value(store, keyword).split()]


def get(store: Store, keyword: str, value_type: ValueType, default: Any = None,
        required: bool = False, item_type: ValueType = ValueType.STRING) -> Any:
    """
    Get a value of any supported type.

    ``item_type`` is only used for ValueType.VECTOR.
    """
    if value_type is ValueType.LIST:
        return get_list(store, keyword, default, required)
    if value_type is ValueType.VECTOR:
        return get_vector(store, keyword, item_type, default, required)
    return _get_scalar(store, keyword, value_type, default, required)


def lookup(store: Store, keyword: str, value_type: ValueType, required: bool = False,
           item_type: ValueType = ValueType.STRING) -> LookupResult:
    """
    Like get, but report the outcome as a LookupResult instead of raising.

    A missing keyword gives NOT_FOUND unless ``required`` is set, in which
    case it is an ERROR carrying MissingKeywordError.
    """
    if not store.keyword_exists(keyword) and not required:
        return LookupResult(keyword, LookupStatus.NOT_FOUND)
    try:
        value = get(store, keyword, value_type, required=required, item_type=item_type)
    except KVParseError as e:
        return LookupResult(keyword, LookupStatus.ERROR, error=e)
    return LookupResult(keyword, LookupStatus.FOUND, value=value)
