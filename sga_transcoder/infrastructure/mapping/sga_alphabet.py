import logging
import string
import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple


_LOGGER = logging.getLogger(__name__)

# Standard Galactic Alphabet, in definition order. The reverse map keeps the
# first letter that produces a given glyph sequence, so order is significant.
SGA_TABLE: Tuple[Tuple[str, str], ...] = (
    ("A", "ᔑ"),
    ("B", "ʖ"),
    ("C", "ᓵ"),
    ("D", "↸"),
    ("E", "ᒷ"),
    ("F", "⎓"),
    ("G", "┤"),
    ("H", "⍑"),
    ("I", "¦"),
    ("J", "⁝"),
    ("K", "ꖌ"),
    ("L", "ꖎ"),
    ("M", "ᒲ"),
    ("N", "リ"),
    ("O", "ヮ"),
    ("P", "і!"),  # cyrillic i + exclamation mark
    ("Q", "ᑑ"),
    ("R", "∷"),
    ("S", "𠃑"),
    ("T", "ᒣ̣"),  # ᒣ + combining dot below
    ("U", "⚍"),
    ("V", "⍊"),
    ("W", "∴"),
    ("X", "⸱/"),
    ("Y", "‖"),
    ("Z", "⨅"),
)

_ASCII_LETTERS = frozenset(string.ascii_letters)


class GlyphAlphabet:
    """Bidirectional mapping between Latin letters and glyph sequences.

    The forward map is keyed by both cases of every letter; the reverse map is
    keyed by glyph sequence and yields the uppercase letter. Both are exposed
    read-only and never change after construction.
    """

    def __init__(self, table: Iterable[Tuple[str, str]]):
        self._initialize_mappings(table)

    def _initialize_mappings(self, table: Iterable[Tuple[str, str]]):
        latin_to_glyph: Dict[str, str] = {}
        glyph_to_latin: Dict[str, str] = {}
        definitions: Dict[str, str] = {}

        for latin, glyph in table:
            if not isinstance(latin, str) or len(latin) != 1 or latin not in _ASCII_LETTERS:
                raise ValueError(f"Alphabet keys must be single Latin letters, got {latin!r}")
            if not isinstance(glyph, str) or not glyph:
                raise ValueError(f"Glyph sequence for {latin!r} must be a non-empty string")
            if any(char in _ASCII_LETTERS for char in glyph):
                raise ValueError(f"Glyph sequence for {latin!r} must not contain Latin letters")

            upper = latin.upper()
            if upper in definitions:
                raise ValueError(f"Letter {upper} is defined more than once")
            definitions[upper] = glyph

            latin_to_glyph[upper] = glyph
            latin_to_glyph[upper.lower()] = glyph

            if glyph in glyph_to_latin:
                _LOGGER.warning(
                    "Glyph sequence %r is shared by %s and %s; decoding yields %s",
                    glyph,
                    glyph_to_latin[glyph],
                    upper,
                    glyph_to_latin[glyph],
                )
                continue
            glyph_to_latin[glyph] = upper

        if not definitions:
            raise ValueError("Alphabet table must define at least one letter")

        self._definitions = MappingProxyType(definitions)
        self._latin_to_glyph = MappingProxyType(latin_to_glyph)
        self._glyph_to_latin = MappingProxyType(glyph_to_latin)
        self._glyph_sequences = tuple(glyph_to_latin)
        self._max_sequence_length = max(len(glyph) for glyph in glyph_to_latin)

        _LOGGER.debug(
            "Built alphabet with %d letters and %d glyph sequences (longest: %d codepoints)",
            len(definitions),
            len(glyph_to_latin),
            self._max_sequence_length,
        )

    @property
    def forward_map(self) -> Mapping[str, str]:
        return self._latin_to_glyph

    @property
    def reverse_map(self) -> Mapping[str, str]:
        return self._glyph_to_latin

    @property
    def glyph_sequences(self) -> Tuple[str, ...]:
        return self._glyph_sequences

    @property
    def max_sequence_length(self) -> int:
        return self._max_sequence_length

    def get_glyph(self, latin_char: str) -> Optional[str]:
        if not latin_char or len(latin_char) != 1:
            return None
        return self._latin_to_glyph.get(latin_char)

    def get_latin_equivalent(self, glyph: str) -> Optional[str]:
        if not glyph:
            return None
        return self._glyph_to_latin.get(glyph)

    def is_valid_glyph(self, sequence: str) -> bool:
        return sequence in self._glyph_to_latin

    def is_valid_latin_character(self, char: str) -> bool:
        return char in self._latin_to_glyph

    def get_all_mappings(self) -> Dict[str, str]:
        return dict(self._definitions)

    def find_collisions(self) -> Dict[str, List[str]]:
        letters_by_glyph: Dict[str, List[str]] = {}
        for latin, glyph in self._definitions.items():
            letters_by_glyph.setdefault(glyph, []).append(latin)
        return {
            glyph: letters
            for glyph, letters in letters_by_glyph.items()
            if len(letters) > 1
        }


class SGAAlphabet(GlyphAlphabet):
    """Process-wide Standard Galactic Alphabet, built on first use."""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    # Publish only a fully built instance.
                    instance = super().__new__(cls)
                    instance._initialize_mappings(SGA_TABLE)
                    cls._instance = instance
        return cls._instance

    def __init__(self):
        # Mappings are built once in __new__.
        pass
