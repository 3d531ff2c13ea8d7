"""
INI parser for plainini.

This module classifies preprocessed logical lines as section headers or
key/value entries and builds an IniConfig from them. Unrecognized lines abort
the parse with a ParseError carrying the offending line.
"""

import re
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models.config import IniConfig, IniError, DEFAULT_SECTION
from .preprocessor import preprocess, split_lines


# The bracket body must contain at least one non-whitespace character.
SECTION_PATTERN = re.compile(r"^\s*\[(.*\S.*)\]\s*$")
# Everything up to the first '=' is the key; the value may be empty.
ENTRY_PATTERN = re.compile(r"^([^=]*)=(.*)$")
COMMENT_PREFIXES = (';', '#')


class ParseError(IniError):
    """Raised when a logical line is neither a section header nor an entry."""

    def __init__(self, line: str, message: Optional[str] = None):
        self.line = line
        super().__init__(message or f'Unrecognized line: "{line}"')


@dataclass
class IniParseResult:
    """
    Result of an INI parsing operation.

    Attributes:
        config: The parsed configuration
        warnings: Accepted-but-unusual input found while parsing
        line_count: Number of logical lines consumed
    """
    config: IniConfig
    warnings: List[str]
    line_count: int


class IniParser:
    """
    Line classifier and parser for INI text.

    Input is first normalized by the preprocessor, then each logical line is
    matched against the section header pattern, then the entry pattern. A
    "current section" cursor starts at the default section and moves on every
    header. Headers register sections with the same rules as
    IniConfig.add_section, so a repeated header raises DuplicateSectionError.
    """

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the INI parser.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def parse(self, text: str) -> IniParseResult:
        """
        Parse INI text.

        Args:
            text: Raw INI text

        Returns:
            IniParseResult containing the parsed configuration and warnings

        Raises:
            ParseError: If a line cannot be classified, or a warning occurs in strict mode
            InvalidNameError: If a header names the default section
            DuplicateSectionError: If a section header appears twice
        """
        return self.parse_lines(split_lines(text))

    def parse_lines(self, lines: Iterable[str]) -> IniParseResult:
        """
        Parse a sequence of raw INI lines.

        Args:
            lines: Raw lines, not yet preprocessed

        Returns:
            IniParseResult containing the parsed configuration and warnings
        """
        logical_lines = preprocess(lines)
        config = IniConfig()
        warnings: List[str] = []
        section = DEFAULT_SECTION

        for line in logical_lines:
            header = SECTION_PATTERN.match(line)
            if header:
                section = header.group(1).strip()
                config.add_section(section)
                continue

            entry = ENTRY_PATTERN.match(line)
            if entry is None:
                raise ParseError(line)

            option = entry.group(1).strip()
            value = entry.group(2).strip()
            for warning in self._get_entry_warnings(option, value, section):
                if self.strict_mode:
                    raise ParseError(line, f'{warning}: "{line}"')
                self.logger.warning(warning)
                warnings.append(warning)
            config.set(section, option, value)

        self.logger.debug(
            f"Parsed {len(logical_lines)} logical lines into {len(config.sections())} sections"
        )

        return IniParseResult(config=config, warnings=warnings, line_count=len(logical_lines))

    def _get_entry_warnings(self, option: str, value: str, section: str) -> List[str]:
        """
        Get warnings for an entry that parses but is probably a mistake.

        Args:
            option: Trimmed option name
            value: Trimmed value
            section: Name of the section receiving the entry

        Returns:
            List of warning messages
        """
        warnings = []

        if not option:
            warnings.append(f"Empty option name in section [{section}]")

        if value.startswith(COMMENT_PREFIXES):
            warnings.append(
                f"Value of '{option}' in section [{section}] starts with a comment character "
                "and is kept literally"
            )

        return warnings

    def validate(self, text: str) -> List[str]:
        """
        Validate INI text without returning the configuration.

        Args:
            text: Raw INI text

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            self.parse(text)
        except IniError as e:
            errors.append(str(e))

        return errors


def loads(text: str, strict_mode: bool = False) -> IniConfig:
    """
    Convenience function to parse INI text.

    Args:
        text: Raw INI text
        strict_mode: Whether to treat warnings as errors

    Returns:
        The parsed configuration

    Raises:
        IniError: If the text is not valid INI
    """
    parser = IniParser(strict_mode=strict_mode)
    return parser.parse(text).config


def load_lines(lines: Iterable[str], strict_mode: bool = False) -> IniConfig:
    """
    Convenience function to parse raw INI lines.

    Args:
        lines: Raw lines, e.g. from a file object
        strict_mode: Whether to treat warnings as errors

    Returns:
        The parsed configuration
    """
    parser = IniParser(strict_mode=strict_mode)
    return parser.parse_lines(lines).config


def validate(text: str, strict_mode: bool = False) -> List[str]:
    """
    Convenience function to validate INI text.

    Args:
        text: Raw INI text
        strict_mode: Whether to treat warnings as errors

    Returns:
        List of validation errors (empty if valid)
    """
    parser = IniParser(strict_mode=strict_mode)
    return parser.validate(text)
