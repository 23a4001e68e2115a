"""
Line codec for .lenv files.

This module converts between the `.lenv` text format and ordered key/value data.
Each line holds one `KEY: value` pair separated by the first colon-space on the
line. Blank lines and `#` comments are skipped on read and never written back.
Lines without a separator are dropped; the parser records them as warnings so
callers that care can inspect them without changing the lenient default.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Union


SEPARATOR = ': '
COMMENT_PREFIX = '#'


class LinoEnvError(Exception):
    """Raised when a .lenv file cannot be read, written or strictly parsed."""
    pass


@dataclass
class Entry:
    """
    A single `key: value` occurrence in file order.

    Attributes:
        key: Key text with surrounding whitespace removed
        value: Value text exactly as it appeared after the separator
        line_number: 1-based line number in the source content
    """
    key: str
    value: str
    line_number: int


@dataclass
class ParseResult:
    """
    Result of parsing .lenv content.

    Attributes:
        entries: Parsed entries in file order, duplicates included
        warnings: Non-fatal messages about skipped malformed lines
        source: Path the content was read from, if any
    """
    entries: List[Entry] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    source: Optional[Path] = None

    def to_multimap(self) -> Dict[str, List[str]]:
        """Group entry values by key, keeping first-seen key order."""
        data: Dict[str, List[str]] = {}
        for entry in self.entries:
            data.setdefault(entry.key, []).append(entry.value)
        return data


class LenvParser:
    """
    Parser and serializer for the .lenv line format.

    The parser is lenient by default: blank lines, comments and lines without a
    `: ` separator never raise. With `strict_mode` enabled a malformed line
    raises LinoEnvError instead of being skipped.
    """

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the parser.

        Args:
            strict_mode: If True, treat malformed lines as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def parse(self, content: str, source: Optional[Path] = None) -> ParseResult:
        """
        Parse .lenv content into entries.

        Args:
            content: Raw file content
            source: Path the content came from, used in messages

        Returns:
            ParseResult with entries in file order and any warnings

        Raises:
            LinoEnvError: In strict mode, if a line has no separator
        """
        result = ParseResult(source=source)

        # Split on newline only; values may hold other line-break characters
        for line_number, line in enumerate(content.split('\n'), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(COMMENT_PREFIX):
                continue

            separator_index = line.find(SEPARATOR)
            if separator_index == -1:
                message = f"Line {line_number}: missing '{SEPARATOR}' separator"
                if self.strict_mode:
                    raise LinoEnvError(f"Malformed line{self._where(source)}: {message}")
                self.logger.debug(f"Skipping malformed line{self._where(source)}: {message}")
                result.warnings.append(message)
                continue

            key = line[:separator_index].strip()
            value = line[separator_index + len(SEPARATOR):]
            result.entries.append(Entry(key=key, value=value, line_number=line_number))

        self.logger.debug(
            f"Parsed {len(result.entries)} entries{self._where(source)} "
            f"({len(result.warnings)} skipped)"
        )
        return result

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Read and parse a .lenv file.

        A missing file parses as empty content.

        Args:
            file_path: Path to the .lenv file

        Returns:
            ParseResult for the file contents

        Raises:
            LinoEnvError: If the file exists but cannot be read or decoded
        """
        file_path = Path(file_path)
        try:
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except FileNotFoundError:
            self.logger.debug(f"File not found, treating as empty: {file_path}")
            return ParseResult(source=file_path)
        except (OSError, UnicodeDecodeError) as e:
            raise LinoEnvError(f"Cannot read lenv file {file_path}: {e}") from e

        return self.parse(content, source=file_path)

    def serialize(self, data: Mapping[str, Sequence[str]]) -> str:
        """
        Render key/value data as .lenv text.

        Keys and their values are emitted in iteration order, one line per
        value, followed by a single trailing newline.

        Args:
            data: Mapping of key to ordered values

        Returns:
            Serialized content
        """
        lines = [
            f"{key}{SEPARATOR}{value}"
            for key, values in data.items()
            for value in values
        ]
        return '\n'.join(lines) + '\n'

    def write_file(self, file_path: Union[str, Path], data: Mapping[str, Sequence[str]]) -> None:
        """
        Serialize data and overwrite the file with it.

        Args:
            file_path: Destination path; its directory must already exist
            data: Mapping of key to ordered values

        Raises:
            LinoEnvError: If the file cannot be written
        """
        file_path = Path(file_path)
        content = self.serialize(data)
        try:
            with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
                f.write(content)
        except OSError as e:
            raise LinoEnvError(f"Cannot write lenv file {file_path}: {e}") from e

        self.logger.debug(f"Wrote {len(data)} keys to {file_path}")

    @staticmethod
    def _where(source: Optional[Path]) -> str:
        return f" in {source}" if source else ""


def parse_content(content: str, strict_mode: bool = False) -> ParseResult:
    """
    Convenience function to parse .lenv content.

    Args:
        content: Raw file content
        strict_mode: Whether to raise on malformed lines

    Returns:
        ParseResult containing entries and warnings
    """
    parser = LenvParser(strict_mode=strict_mode)
    return parser.parse(content)


def serialize(data: Mapping[str, Sequence[str]]) -> str:
    """Convenience function to render key/value data as .lenv text."""
    return LenvParser().serialize(data)


def validate_lenv_file(file_path: Union[str, Path]) -> List[str]:
    """
    Report lines of a .lenv file that would be skipped on read.

    Args:
        file_path: Path to the .lenv file

    Returns:
        List of warning messages (empty if clean or missing)
    """
    parser = LenvParser()
    return parser.parse_file(file_path).warnings
