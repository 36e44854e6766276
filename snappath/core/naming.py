"""Snapshot file name generation.

Names produced by the default algorithm look like
``button-test-ts-renders-correctly-1-bd10d.snap.png``: the slugified test
file name, the slugified test name, the occurrence counter and a short md5
checksum of everything before it.
"""

from __future__ import annotations

import hashlib
import logging
import os
import re
import string
import unicodedata
from typing import Protocol

logger = logging.getLogger("snappath.naming")

FILENAME_SUFFIX = ".snap.png"
FILENAME_CHECKSUM_LENGTH = 5
MAX_TEST_FILENAME_LENGTH = 75
# 255 is the Windows limit. Room is kept for the suffix, the checksum and the three "-" separators.
MAX_FILENAME_LENGTH = 255 - len(FILENAME_SUFFIX) - FILENAME_CHECKSUM_LENGTH - 3

_APOSTROPHES = re.compile(r"['’]")

# Latin-1 and Latin Extended-A letters without a canonical decomposition
_DEBURRED_LETTERS = str.maketrans({
    "Æ": "Ae", "æ": "ae", "Ð": "D", "ð": "d", "Ø": "O", "ø": "o",
    "Þ": "Th", "þ": "th", "ß": "ss",
    "Đ": "D", "đ": "d", "Ħ": "H", "ħ": "h", "ı": "i", "Ĳ": "IJ", "ĳ": "ij",
    "ĸ": "k", "Ŀ": "L", "ŀ": "l", "Ł": "L", "ł": "l", "ŉ": "'n",
    "Ŋ": "N", "ŋ": "n", "Œ": "Oe", "œ": "oe", "Ŧ": "T", "ŧ": "t", "ſ": "s",
})

# Word splitting as lodash does it. "Misc" letters (non-latin scripts) count as
# lower case when they follow latin letters and as upper case when they lead.
_WORD = re.compile(
    r"""
    [A-Z]?[a-z]+(?=[\W_]|[A-Z]|$)                   # foo, Bar before a break or hump
    | [^\W_a-z0-9]+(?=[\W_]|[A-Z][^\W_A-Z0-9]|$)    # HTML in HTMLParser, non-latin runs
    | [A-Z]?[^\W_A-Z0-9]+                           # mixed runs like testЖ
    | [A-Z]+
    | [0-9]*(?:1ST|2ND|3RD|(?![123])[0-9]TH)(?=\b|[a-z_])
    | [0-9]*(?:1st|2nd|3rd|(?![123])[0-9]th)(?=\b|[A-Z_])
    | [0-9]+
    """,
    re.VERBOSE,
)


class NamingStrategy(Protocol):
    """Custom file name generator.

    Receives the slugified test file name, the slugified test name and the
    occurrence counter. Plain functions with this signature qualify.
    """

    def __call__(self, base_part: str, identifier_part: str, counter: int) -> str: ...


def _deburr(text: str) -> str:
    """Map latin letters to plain ASCII (``é`` -> ``e``, ``ß`` -> ``ss``)."""
    decomposed = unicodedata.normalize("NFKD", text.translate(_DEBURRED_LETTERS))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def kebab_case(text: str) -> str:
    """Convert text to lower-case, hyphen-separated words.

    Splits on any non-alphanumeric character, on camelCase humps and between
    letters and digits, so ``fooBar2`` becomes ``foo-bar-2`` and
    ``button.test.ts`` becomes ``button-test-ts``. Apostrophes are dropped
    without splitting the word.

    Args:
        text: Arbitrary input string

    Returns:
        Slug, empty when text contains no letters or digits
    """
    cleaned = _APOSTROPHES.sub("", _deburr(text))
    return "-".join(word.lower() for word in _WORD.findall(cleaned))


class PatternNaming:
    """Naming strategy backed by a ``str.format`` template.

    Available fields are ``{file}``, ``{identifier}`` and ``{counter}``, e.g.
    ``"{identifier}-{counter}.png"``.
    """

    FIELDS = frozenset({"file", "identifier", "counter"})

    def __init__(self, pattern: str):
        """Initialize strategy.

        Args:
            pattern: Format template

        Raises:
            ValueError: If the template is malformed or uses unknown fields
        """
        try:
            parsed = list(string.Formatter().parse(pattern))
        except ValueError as e:
            raise ValueError(f"Invalid file name pattern {pattern!r}: {e}") from e

        fields = {name.split(".")[0].split("[")[0] for _, name, _, _ in parsed if name is not None}
        unknown = fields - self.FIELDS
        if "" in unknown:
            raise ValueError(f"Positional fields are not allowed in file name pattern {pattern!r}")
        if unknown:
            raise ValueError(
                f"Unknown field(s) in file name pattern {pattern!r}: {', '.join(sorted(unknown))}. "
                f"Use {{file}}, {{identifier}} or {{counter}}"
            )
        self.pattern = pattern

    def __call__(self, base_part: str, identifier_part: str, counter: int) -> str:
        return self.pattern.format(file=base_part, identifier=identifier_part, counter=counter)

    def __repr__(self) -> str:
        return f"PatternNaming({self.pattern!r})"


def _checksum(stem: str) -> str:
    return hashlib.md5(stem.encode("utf-8")).hexdigest()[:FILENAME_CHECKSUM_LENGTH]


def build_file_name(
    test_file_path: str | os.PathLike[str],
    test_name: str,
    counter: int,
    naming: NamingStrategy | None = None,
) -> str:
    """Calculate the file name of an individual image snapshot.

    With a custom naming strategy the slugified parts are handed over and its
    result is returned as is. Otherwise a name of at most 255 characters
    ending in ``.snap.png`` is generated.

    Args:
        test_file_path: Path of the test file
        test_name: Full name of the current test
        counter: Occurrence of this snapshot within the test (1-indexed)
        naming: Optional custom naming strategy

    Returns:
        File name for the snapshot
    """
    file_part = kebab_case(os.path.basename(os.fspath(test_file_path)))
    identifier_part = kebab_case(test_name)

    if naming is not None:
        file_name = naming(file_part, identifier_part, counter)
        logger.debug(f"Custom naming {naming!r} -> {file_name}")
        return file_name

    limited_file_part = file_part[:MAX_TEST_FILENAME_LENGTH]
    budget = max(0, MAX_FILENAME_LENGTH - len(limited_file_part) - len(str(counter)))
    limited_identifier_part = identifier_part[:budget]

    stem = f"{limited_file_part}-{limited_identifier_part}-{counter}"
    file_name = f"{stem}-{_checksum(stem)}{FILENAME_SUFFIX}"

    if len(limited_identifier_part) < len(identifier_part):
        logger.debug(f"Truncated test name '{test_name}' to {budget} characters")
    return file_name
