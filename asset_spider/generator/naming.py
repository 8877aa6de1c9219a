"""Turn asset file names into collision-free Dart identifiers.

The policy is deterministic:

1. Strip the extension.
2. Split the remaining name into words on every non-alphanumeric character
   and on lower-to-upper case boundaries (``darkMode`` becomes ``dark``,
   ``Mode``).
3. Join the words as lowerCamelCase, or as lower snake_case when
   ``use_underscores`` is set, with an optional prefix as the first word.
4. Prepend the word ``asset`` when the result is empty, starts with a digit,
   or is a reserved word.
5. Within one class scope, later duplicates get ``_2``, ``_3`` and so on.

Examples
--------
>>> synthesizer = IdentifierSynthesizer()
>>> synthesizer.synthesize("ic_arrow-back.png")
'icArrowBack'
>>> synthesizer.synthesize("ic_arrow_back.svg")
'icArrowBack_2'
>>> IdentifierSynthesizer(use_underscores=True).synthesize("2x Logo.png")
'asset_2x_logo'
"""

from __future__ import annotations

import collections.abc as cabc
import re

_WORD_SEPARATOR = re.compile(r"[^0-9A-Za-z]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
FALLBACK_WORD = "asset"

DART_RESERVED_WORDS = frozenset(
    {
        "abstract", "as", "assert", "async", "await", "break", "case", "catch",
        "class", "const", "continue", "covariant", "default", "deferred", "do",
        "dynamic", "else", "enum", "export", "extends", "extension", "external",
        "factory", "false", "final", "finally", "for", "function", "get", "hide",
        "if", "implements", "import", "in", "interface", "is", "late", "library",
        "mixin", "new", "null", "on", "operator", "part", "required", "rethrow",
        "return", "set", "show", "static", "super", "switch", "sync", "this",
        "throw", "true", "try", "typedef", "var", "void", "while", "with", "yield",
    }
)  # fmt: skip


def split_words(name: str) -> list[str]:
    """Split ``name`` into identifier words."""
    words: list[str] = []
    for chunk in _WORD_SEPARATOR.split(name):
        words.extend(part for part in _CAMEL_BOUNDARY.split(chunk) if part)
    return words


def strip_extension(file_name: str) -> str:
    """Return ``file_name`` without its final extension."""
    stem, dot, _ext = file_name.rpartition(".")
    return stem if dot and stem else file_name


def join_words(words: cabc.Sequence[str], *, use_underscores: bool = False) -> str:
    """Join ``words`` as lowerCamelCase or snake_case."""
    if use_underscores:
        return "_".join(word.lower() for word in words)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in tail)


class IdentifierSynthesizer:
    """Produce unique identifiers for the members of one generated class."""

    def __init__(
        self,
        *,
        use_underscores: bool = False,
        prefix: str | None = None,
        reserved: cabc.Iterable[str] = (),
    ) -> None:
        """Initialize a synthesizer for a single class scope.

        Parameters
        ----------
        use_underscores : bool, optional
            Emit snake_case instead of lowerCamelCase identifiers.
        prefix : str, optional
            Default prefix word applied to every identifier.
        reserved : Iterable[str], optional
            Extra member names that identifiers must not shadow, such as the
            ``values`` list.
        """
        self.use_underscores = use_underscores
        self.prefix = prefix
        self._reserved = DART_RESERVED_WORDS | frozenset(reserved)
        self._taken: set[str] = set()

    def synthesize(self, file_name: str, *, prefix: str | None = None) -> str:
        """Return a legal identifier for ``file_name`` unique in this scope."""
        return self.synthesize_name(strip_extension(file_name), prefix=prefix)

    def synthesize_name(self, name: str, *, prefix: str | None = None) -> str:
        """Return a unique identifier for ``name`` taken as-is."""
        words = split_words(name)
        chosen_prefix = prefix if prefix is not None else self.prefix
        if chosen_prefix:
            words = split_words(chosen_prefix) + words
        identifier = join_words(words, use_underscores=self.use_underscores)
        if not identifier or identifier[0].isdigit() or identifier in self._reserved:
            identifier = join_words(
                [FALLBACK_WORD, *words], use_underscores=self.use_underscores
            )
        return self._claim(identifier)

    def _claim(self, identifier: str) -> str:
        candidate = identifier
        counter = 1
        while candidate in self._taken or candidate in self._reserved:
            counter += 1
            candidate = f"{identifier}_{counter}"
        self._taken.add(candidate)
        return candidate


__all__ = [
    "DART_RESERVED_WORDS",
    "IdentifierSynthesizer",
    "join_words",
    "split_words",
    "strip_extension",
]
