"""
Argument tokenizer for command arguments.

Splits an argument string such as ``" pl/John Doe t/U12 tg/a tg/b"`` into a
preamble and a mapping from prefix to every value that followed it.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..services.messages import duplicate_prefixes_message


class ParseError(Exception):
    """Raised when user input does not conform to the expected format."""
    pass


@dataclass(frozen=True)
class Prefix:
    """A marker such as ``t/`` that introduces a field value."""
    prefix: str

    def __str__(self) -> str:
        return self.prefix


# Recognised prefixes
PREFIX_PLAYER = Prefix("pl/")
PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TEAM = Prefix("t/")
PREFIX_POSITION = Prefix("ps/")
PREFIX_INJURY = Prefix("i/")
PREFIX_TAG = Prefix("tg/")


class ArgumentMultimap:
    """
    Maps prefixes to the values that followed them.

    The preamble (text before the first recognised prefix) is stored under
    the empty prefix.
    """

    _PREAMBLE = Prefix("")

    def __init__(self) -> None:
        self._values: Dict[Prefix, List[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> Optional[str]:
        """Return the last value for ``prefix``, or None if absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> List[str]:
        return list(self._values.get(prefix, []))

    def is_present(self, prefix: Prefix) -> bool:
        return prefix in self._values

    @property
    def preamble(self) -> str:
        return self.get_value(self._PREAMBLE) or ""

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """
        Raise ParseError if any of ``prefixes`` occurs more than once.

        Raises:
            ParseError: Naming every duplicated prefix
        """
        duplicated = [p for p in set(prefixes) if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(duplicate_prefixes_message(duplicated))


def _find_prefix_positions(args: str, prefix: Prefix) -> List[int]:
    """Return start indices of ``prefix`` occurrences preceded by whitespace."""
    positions = []
    marker = " " + prefix.prefix
    start = args.find(marker)
    while start != -1:
        positions.append(start + 1)
        start = args.find(marker, start + 1)
    return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Tokenize ``args`` against the recognised ``prefixes``.

    A prefix only counts when it follows whitespace; anything that looks like
    an unrecognised prefix is kept as literal text of the preceding value.

    Args:
        args: Argument string, normally starting with a space
        prefixes: Prefixes to recognise

    Returns:
        ArgumentMultimap with trimmed values
    """
    normalized = args.replace("\t", " ").replace("\n", " ")
    found: List[Tuple[int, Prefix]] = []
    for prefix in prefixes:
        found.extend((position, prefix) for position in _find_prefix_positions(normalized, prefix))
    found.sort(key=lambda item: item[0])

    multimap = ArgumentMultimap()
    first = found[0][0] if found else len(normalized)
    multimap.put(ArgumentMultimap._PREAMBLE, normalized[:first].strip())

    for index, (position, prefix) in enumerate(found):
        end = found[index + 1][0] if index + 1 < len(found) else len(normalized)
        multimap.put(prefix, normalized[position + len(prefix.prefix):end].strip())
    return multimap


def are_prefixes_present(multimap: ArgumentMultimap, *prefixes: Prefix) -> bool:
    """Return True if every one of ``prefixes`` occurs at least once."""
    return all(multimap.is_present(p) for p in prefixes)
