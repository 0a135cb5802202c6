"""
Line parser for KVParse configuration files.

Turns raw ``keyword: value`` / ``keyword=value`` lines into Store entries.
Parsing is fail-fast: the first malformed line raises ConfigSyntaxError and
the rest of the source is not read. Entries added before the bad line stay in
the Store.
"""

import io
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from KVParse.defaults import COMMENT_MARKER, DELIMITERS, IDENTIFIER_RE, TRIM_CHARS
from KVParse.exceptions import ConfigIOError, ConfigSyntaxError
from KVParse.store import Store
from KVParse.utils.logging import get_logger

logger = get_logger(__name__)


def strip_comment(line: str) -> str:
    """Drop everything from the first comment marker to end of line."""
    hashpos = line.find(COMMENT_MARKER)
    if hashpos != -1:
        return line[:hashpos]
    return line


def find_delimiter(line: str) -> int:
    """
    Return the position of the keyword/value delimiter, or -1.

    The first ':' is preferred; '=' is only used when the line has no ':'.
    """
    for delimiter in DELIMITERS:
        pos = line.find(delimiter)
        if pos != -1:
            return pos
    return -1


def is_valid_keyword(keyword: str) -> bool:
    return IDENTIFIER_RE.fullmatch(keyword) is not None


def split_line(line: str, source: str = "<string>", line_number: Optional[int] = None) -> Tuple[str, str]:
    """
    Split a comment-free, non-blank line into a trimmed (keyword, value) pair.

    Args:
        line: The line with comments already removed
        source: Name of the input, used in error messages
        line_number: 1-based line number, used in error messages

    Returns:
        Tuple[str, str]: The keyword and the raw value

    Raises:
        ConfigSyntaxError: If the line has no delimiter or the keyword is not
            a valid identifier
    """
    delimiterpos = find_delimiter(line)
    if delimiterpos == -1:
        raise ConfigSyntaxError(source=source, line_number=line_number, line=line)

    keyword = line[:delimiterpos].strip(TRIM_CHARS)
    value = line[delimiterpos + 1:].strip(TRIM_CHARS)

    if not is_valid_keyword(keyword):
        cause = ValueError(f"invalid keyword '{keyword}'")
        raise ConfigSyntaxError(source=source, line_number=line_number, line=line, cause=cause)

    return keyword, value


def parse_lines(store: Store, source: str, lines: Iterable[str]) -> int:
    """
    Parse a sequence of configuration lines into a Store.

    Args:
        store: The Store receiving the entries
        source: Name of the input (e.g. a file name), used in error messages
        lines: The lines to parse; trailing newlines are ignored

    Returns:
        int: The number of entries added

    Raises:
        ConfigSyntaxError: On the first malformed line
        TypeError: If lines is a single str
    """
    if isinstance(lines, str):
        raise TypeError("lines must be a sequence of lines, not a str; use parse_string for text")

    added = 0
    for line_number, raw_line in enumerate(lines, 1):
        line = strip_comment(raw_line.rstrip("\n"))

        if not line.strip():
            continue

        try:
            keyword, value = split_line(line, source, line_number)
        except ConfigSyntaxError as e:
            logger.debug(f"Rejected line {line_number} of {source}: {e.cause or e}")
            raise

        store.add_value(keyword, value)
        added += 1
        logger.debug(f"{source} ({line_number}): {keyword} = {value!r}")

    return added


def parse_string(store: Store, text: str, source: str = "<string>") -> int:
    """
    Parse configuration text held in memory. See parse_lines.

    Lines end only at LF, CRLF or CR, as for a file opened in text mode.
    Other Unicode line separators such as form feed stay inside the value.
    """
    return parse_lines(store, source, io.StringIO(text, newline=None))


def read_configuration_file(store: Store, path: Union[str, Path]) -> bool:
    """
    Parse a configuration file into a Store.

    Args:
        store: The Store receiving the entries
        path: Path of the configuration file; also used as the source name
            in error messages

    Returns:
        bool: True; errors are raised

    Raises:
        ConfigIOError: If the file cannot be opened or read
        ConfigSyntaxError: On the first malformed line
    """
    filename = str(path)
    try:
        with open(filename, "r", encoding="utf-8") as f:
            added = parse_lines(store, filename, f)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {filename}: {e}")
        raise ConfigIOError(f"failed to open configuration file: {filename}", path=filename, cause=e) from e

    logger.info(f"Loaded {added} entries from {filename}")
    return True
