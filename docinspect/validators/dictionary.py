"""Key/value dictionary loader: reads ``expression<TAB>replacement`` resources.

Loaded once at validator initialization; the result is never mutated.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

import structlog

from docinspect.config import get_settings
from docinspect.exceptions import ResourceLoadError

logger = structlog.get_logger()


def parse_key_value_lines(lines: Iterable[str], delimiter: Optional[str] = None) -> dict[str, str]:
    """Parse dictionary lines into a mapping.

    Blank lines are ignored. A line without exactly one key and one value is
    logged and skipped. The first occurrence of a key wins.
    """
    delimiter = delimiter or get_settings().DICTIONARY_DELIMITER
    entries: dict[str, str] = {}

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        parts = line.split(delimiter)
        if len(parts) != 2 or not parts[0]:
            logger.warning("dictionary_line_skipped", line_number=line_number, line=line[:80])
            continue

        key, value = parts
        if key in entries:
            logger.debug("dictionary_duplicate_key", key=key, line_number=line_number)
            continue
        entries[key] = value

    return entries


def load_key_value_dictionary(
    path: Union[str, Path],
    validator_name: str = "",
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> dict[str, str]:
    """Load a key/value dictionary file.

    Raises:
        ResourceLoadError: if the file is missing, unreadable or not decodable
    """
    settings = get_settings()
    encoding = encoding or settings.DICTIONARY_ENCODING
    path = Path(path)

    try:
        with path.open("r", encoding=encoding) as stream:
            entries = parse_key_value_lines(stream, delimiter or settings.DICTIONARY_DELIMITER)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("dictionary_load_failed", validator=validator_name, path=str(path), error=str(e))
        raise ResourceLoadError(validator_name, str(path), e) from e

    logger.info("dictionary_loaded", validator=validator_name, path=str(path), entries=len(entries))
    return entries
