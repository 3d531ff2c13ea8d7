"""
INI serializer for plainini.

Renders an IniConfig as canonical INI text: the default section first with no
header, then every named section under its `[name]` header in first-seen
order. No escaping is performed.
"""

import logging
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.config import IniConfig


logger = logging.getLogger(__name__)


class IniSerializer:
    """
    Serializer turning an IniConfig into INI text.

    Each block (the default section, then each named section) is its
    items joined by newlines and terminated by a single newline.
    """

    def __init__(self, delimiter: str = " = "):
        """
        Initialize the serializer.

        Args:
            delimiter: Text placed between an option name and its value
        """
        self.delimiter = delimiter

    def _format_items(self, items: List[Tuple[str, str]]) -> str:
        """
        Render option/value pairs as entry lines.

        An empty option name is written without the delimiter's leading
        whitespace, since an indented line reads back as a continuation.

        Args:
            items: Option/value pairs of one section

        Returns:
            Entry lines joined by newlines
        """
        lines = []
        for option, value in items:
            delimiter = self.delimiter if option else self.delimiter.lstrip()
            lines.append(f"{option}{delimiter}{value}")
        return "\n".join(lines)

    def serialize(self, config: 'IniConfig') -> str:
        """
        Render a configuration as INI text.

        Args:
            config: Configuration to render

        Returns:
            INI text
        """
        parts = [self._format_items(list(config.defaults().items())), "\n"]

        for section in config.sections():
            parts.append(f"[{section}]\n")
            parts.append(self._format_items(config.items(section)))
            parts.append("\n")

        logger.debug(f"Serialized {len(config.sections())} sections")
        return "".join(parts)


def dumps(config: 'IniConfig') -> str:
    """
    Convenience function to render a configuration as canonical INI text.

    Args:
        config: Configuration to render

    Returns:
        INI text
    """
    return IniSerializer().serialize(config)
