"""
KVParse - A parser and typed accessor for line-oriented keyword/value configuration files.

Configuration files hold one ``keyword: value`` or ``keyword=value`` entry per
line, with ``#`` comments and blank lines ignored. A keyword may be given more
than once; all its values are kept in order.

Key Components:
- Settings: A registry owning a Store, with parsing and typed getters
- Store: The keyword to value-list mapping
- ValueType / LookupResult: Type-directed access without exceptions
- CLI: Command-line interface for dumping and querying configuration files

Usage Examples:
    from KVParse import Settings
    settings = Settings()
    settings.read_configuration_file("run.cfg")
    population = settings.get_unsigned("population_size", required=True)
    verbose = settings.get_boolean("verbose", default=False)

    # One shared registry per process
    from KVParse import get_settings
    get_settings().read_configuration_file("run.cfg")

    # Setting the log level
    from KVParse import set_log_level
    set_log_level('debug')
"""

__version__ = '1.0.0'

from KVParse.utils.logging import get_logger, set_log_level, configure_logging, reset_logging
from KVParse.exceptions import (
    KVParseError, ParseError, ConfigSyntaxError, ConfigIOError, AccessError,
    MissingKeywordError, AmbiguousKeywordError, IllegalValueError,
)
from KVParse.store import Store
from KVParse.accessor import ValueType, LookupResult, LookupStatus
from KVParse.settings import Settings, get_settings

__all__ = [
    'Settings', 'get_settings', 'Store', 'ValueType', 'LookupResult', 'LookupStatus',
    'KVParseError', 'ParseError', 'ConfigSyntaxError', 'ConfigIOError', 'AccessError',
    'MissingKeywordError', 'AmbiguousKeywordError', 'IllegalValueError',
    'get_logger', 'set_log_level', 'configure_logging', 'reset_logging',
]
