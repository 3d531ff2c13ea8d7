"""
Configuration data model for INI documents.

This module defines the in-memory representation of a parsed INI document:
an always-present default section plus an ordered registry of named sections,
each mapping option names to string values.
"""

from typing import Dict, List, Optional, Any, Iterable, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator


DEFAULT_SECTION = "default"


class IniError(Exception):
    """Base class for every error raised by plainini."""
    pass


class InvalidNameError(IniError, ValueError):
    """Raised when a section name is reserved for the default section."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Invalid section name: {section!r} is reserved for the default section")


class DuplicateSectionError(IniError):
    """Raised when a section is registered twice."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Section already exists: {section!r}")


class NoSectionError(IniError):
    """Raised when a mutation targets a section that was never registered."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"No section: {section!r}")


def is_default_name(name: str) -> bool:
    """Check whether a section name refers to the default section."""
    return name.lower() == DEFAULT_SECTION


class IniConfig(BaseModel):
    """
    Parsed INI configuration.

    Entries that precede any section header live in the default section, which
    is addressed by the name "default" in any letter case. Named sections are
    kept in first-seen order and looked up case-sensitively.

    Lookups report a missing section or option by returning None rather than
    raising; mutations of an unregistered section raise NoSectionError.

    Attributes:
        default_options: Options of the default section
        section_options: Options of each named section, keyed by section name
    """

    model_config = ConfigDict(populate_by_name=True)

    default_options: Dict[str, str] = Field(
        default_factory=dict, alias="defaults", description="Options of the default section"
    )
    section_options: Dict[str, Dict[str, str]] = Field(
        default_factory=dict, alias="sections", description="Options of each named section"
    )

    @model_validator(mode='after')
    def validate_section_names(self) -> 'IniConfig':
        """Reject named sections that collide with the default section."""
        for name in self.section_options:
            if is_default_name(name):
                raise InvalidNameError(name)
        return self

    def _get_section(self, name: str) -> Optional[Dict[str, str]]:
        """
        Resolve a section name to its option mapping.

        Args:
            name: Section name; "default" in any case resolves to the defaults

        Returns:
            The live option mapping, or None if the section is not registered
        """
        if is_default_name(name):
            return self.default_options
        return self.section_options.get(name)

    def defaults(self) -> Dict[str, str]:
        """Return the options of the default section."""
        return self.default_options

    def sections(self) -> List[str]:
        """Return registered section names in first-seen order, excluding the default section."""
        return list(self.section_options)

    def add_section(self, name: str) -> None:
        """
        Register an empty section.

        Args:
            name: Section name (case-sensitive)

        Raises:
            InvalidNameError: If name is "default" in any letter case
            DuplicateSectionError: If the section is already registered
        """
        if is_default_name(name):
            raise InvalidNameError(name)
        if name in self.section_options:
            raise DuplicateSectionError(name)
        self.section_options[name] = {}

    def has_section(self, name: str) -> bool:
        """Check whether a named section is registered. The default section is never reported."""
        return name in self.section_options

    def options(self, name: str) -> Optional[List[str]]:
        """Return the option names of a section, or None if the section does not exist."""
        section = self._get_section(name)
        return list(section) if section is not None else None

    def has_option(self, name: str, option: str) -> bool:
        """Check whether a section exists and contains the given option."""
        section = self._get_section(name)
        return section is not None and option in section

    def get(self, name: str, option: str) -> Optional[str]:
        """Return an option value, or None if the section or option is missing."""
        section = self._get_section(name)
        return section.get(option) if section is not None else None

    def items(self, name: str) -> Optional[List[Tuple[str, str]]]:
        """Return (option, value) pairs of a section, or None if the section does not exist."""
        section = self._get_section(name)
        return list(section.items()) if section is not None else None

    def set(self, name: str, option: str, value: str) -> None:
        """
        Set an option value, creating or overwriting it.

        Raises:
            NoSectionError: If the named section is not registered
        """
        section = self._get_section(name)
        if section is None:
            raise NoSectionError(name)
        section[option] = value

    def remove_option(self, name: str, option: str) -> bool:
        """
        Remove an option from a section.

        Returns:
            True if the option existed and was removed, False otherwise

        Raises:
            NoSectionError: If the named section is not registered
        """
        section = self._get_section(name)
        if section is None:
            raise NoSectionError(name)
        if option in section:
            del section[option]
            return True
        return False

    def remove_section(self, name: str) -> bool:
        """
        Remove a named section.

        The default section cannot be removed; naming it clears its options
        instead. Only the removal of a registered named section counts as a
        removal.

        Returns:
            True if a registered section was removed, False otherwise
        """
        if is_default_name(name):
            self.default_options.clear()
        if name in self.section_options:
            del self.section_options[name]
            return True
        return False

    def to_string(self) -> str:
        """Render the configuration as canonical INI text."""
        from ..config.serializer import dumps
        return dumps(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'IniConfig':
        """Create configuration from dictionary representation."""
        return cls.model_validate(data)

    @classmethod
    def from_string(cls, text: str) -> 'IniConfig':
        """Parse INI text into a configuration."""
        from ..config.parser import loads
        return loads(text)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'IniConfig':
        """Parse a sequence of raw INI lines into a configuration."""
        from ..config.parser import load_lines
        return load_lines(lines)

    def __str__(self) -> str:
        """String representation of the configuration as INI text."""
        return self.to_string()
