# reqlix:header:start
#
#   project      : Reqlix
#   file         : indexing.py
#   file_relpath : src/reqlix/indexing.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Prefix allocation and index generation.

All functions here are pure: they take the full set of sibling names or
prefixes as explicit input and never touch the filesystem.

Index format:
    ``{category_prefix}.{chapter_prefix}.{number}``, e.g. ``G.S.1``.

Prefix rule (`compute_prefix`):
    1. Keep the ASCII letters of the name, uppercased.
    2. Use the first letter if no sibling holds it.
    3. Otherwise extend one letter at a time until unique.
    4. When the letters are exhausted, append a decimal suffix to the full
       letter string, starting at 2 (``GEN``, ``GEN2``, ``GEN3``, ...).

Reuse rule:
    A category or chapter that already owns a well-formed requirement keeps the
    prefix found in that requirement's index; `allocate_prefixes` honors reused
    prefixes before computing any new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from reqlix.core.errors import ReqlixValidationError

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping

INDEX_SEPARATOR: str = "."


def letters_of(name: str) -> str:
    """Return the ASCII letters of ``name``, uppercased.

    Args:
        name (str): Category or chapter name.

    Returns:
        str: The filtered letters (may be empty).
    """
    return "".join(c for c in name if c.isascii() and c.isalpha()).upper()


def compute_prefix(name: str, existing_prefixes: Collection[str]) -> str:
    """Compute the shortest prefix of ``name`` not in ``existing_prefixes``.

    Args:
        name (str): Category or chapter name.
        existing_prefixes (Collection[str]): Prefixes already held by siblings.

    Returns:
        str: A prefix not contained in ``existing_prefixes``.

    Raises:
        ValueError: If ``name`` has no ASCII letters.
    """
    letters: str = letters_of(name)
    if not letters:
        raise ValueError(f"Cannot derive a prefix from {name!r}: no ASCII letters")

    for end in range(1, len(letters) + 1):
        candidate: str = letters[:end]
        if candidate not in existing_prefixes:
            return candidate

    suffix: int = 2
    while f"{letters}{suffix}" in existing_prefixes:
        suffix += 1
    return f"{letters}{suffix}"


def allocate_prefixes(names: Iterable[str], reused: Mapping[str, str]) -> dict[str, str]:
    """Assign a unique prefix to every name.

    Names present in ``reused`` keep their prefix. Remaining names are allocated
    in iteration order against the growing set of taken prefixes. Names without
    ASCII letters get no entry.

    Args:
        names (Iterable[str]): Sibling names, in allocation order.
        reused (Mapping[str, str]): Prefixes read from existing requirement indices.

    Returns:
        dict[str, str]: Mapping of name to prefix.
    """
    ordered: list[str] = list(names)
    prefixes: dict[str, str] = {n: reused[n] for n in ordered if n in reused}
    taken: set[str] = set(prefixes.values())
    for name in ordered:
        if name in prefixes or not letters_of(name):
            continue
        prefix: str = compute_prefix(name, taken)
        prefixes[name] = prefix
        taken.add(prefix)
    return prefixes


@dataclass(frozen=True, slots=True)
class RequirementIndex:
    """A parsed requirement index.

    Attributes:
        category (str): Category prefix.
        chapter (str): Chapter prefix.
        number (int): Requirement number within the chapter.
    """

    category: str
    chapter: str
    number: int

    @classmethod
    def parse(cls, index: str) -> RequirementIndex:
        """Parse ``{category}.{chapter}.{number}``.

        Args:
            index (str): Index text.

        Returns:
            RequirementIndex: The parsed index.

        Raises:
            ReqlixValidationError: If the index does not have exactly three
                non-empty parts with an all-digit number.
        """
        parts: list[str] = index.split(INDEX_SEPARATOR)
        if (
            len(parts) != 3
            or not all(parts)
            or not (parts[2].isascii() and parts[2].isdigit())
        ):
            raise ReqlixValidationError(f"Invalid index format: {index}")
        return cls(category=parts[0], chapter=parts[1], number=int(parts[2]))

    @classmethod
    def try_parse(cls, index: str) -> RequirementIndex | None:
        """Return the parsed index, or None when ``index`` is not well formed."""
        try:
            return cls.parse(index)
        except ReqlixValidationError:
            return None

    def __str__(self) -> str:
        return INDEX_SEPARATOR.join((self.category, self.chapter, str(self.number)))


def next_number(existing_indices: Iterable[str]) -> int:
    """Return one more than the highest requirement number in use.

    Unparseable indices are ignored. Gaps left by deletions are never reused.

    Args:
        existing_indices (Iterable[str]): Indices of the chapter's requirements.

    Returns:
        int: The next requirement number (1 for an empty chapter).
    """
    numbers: list[int] = [
        parsed.number
        for parsed in (RequirementIndex.try_parse(i) for i in existing_indices)
        if parsed is not None
    ]
    return max(numbers, default=0) + 1


def generate_index(
    category_prefix: str,
    chapter_prefix: str,
    existing_indices: Iterable[str],
) -> str:
    """Build the index for a new requirement.

    Args:
        category_prefix (str): Prefix of the target category.
        chapter_prefix (str): Prefix of the target chapter.
        existing_indices (Iterable[str]): Indices already present in the chapter.

    Returns:
        str: The new index, e.g. ``"G.S.3"``.
    """
    return str(
        RequirementIndex(
            category=category_prefix,
            chapter=chapter_prefix,
            number=next_number(existing_indices),
        )
    )
