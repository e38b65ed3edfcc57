"""Latin <-> Standard Galactic Alphabet transcoding.

``encode`` substitutes each Latin letter with its glyph sequence, ``decode``
reverses it with a greedy longest-match scan, and ``auto_convert`` picks the
direction from whether the input already contains glyph text. Characters
outside the alphabet always pass through unchanged.
"""

import logging
import time
from functools import lru_cache
from typing import List, Optional

from sga_transcoder.domain.entities.conversion_result import ConversionResult, Direction
from sga_transcoder.infrastructure.mapping.sga_alphabet import GlyphAlphabet, SGAAlphabet


_LOGGER = logging.getLogger(__name__)


def _require_text(text) -> str:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    return text


class Transcoder:
    def __init__(self, alphabet: Optional[GlyphAlphabet] = None):
        self.alphabet = alphabet if alphabet is not None else SGAAlphabet()

    def encode(self, text: str) -> str:
        """Convert Latin letters to glyph sequences, one codepoint at a time."""
        _require_text(text)
        forward_map = self.alphabet.forward_map
        return "".join(forward_map.get(char, char) for char in text)

    def decode(self, text: str) -> str:
        """Convert glyph sequences back to uppercase Latin letters.

        At each position the longest registered sequence length is tried
        first, so a two-codepoint glyph is never read as its one-codepoint
        prefix followed by a stray character.
        """
        _require_text(text)
        reverse_map = self.alphabet.reverse_map
        longest = self.alphabet.max_sequence_length

        result: List[str] = []
        i = 0
        while i < len(text):
            for length in range(min(longest, len(text) - i), 0, -1):
                latin = reverse_map.get(text[i : i + length])
                if latin is not None:
                    result.append(latin)
                    i += length
                    break
            else:
                result.append(text[i])
                i += 1
        return "".join(result)

    def contains_glyph(self, text: str) -> bool:
        _require_text(text)
        return any(glyph in text for glyph in self.alphabet.glyph_sequences)

    def detect_direction(self, text: str) -> Direction:
        return Direction.DECODE if self.contains_glyph(text) else Direction.ENCODE

    def auto_convert(self, text: str) -> str:
        """Decode text that contains any glyph sequence, encode anything else."""
        _require_text(text)
        if not text:
            return ""
        if self.detect_direction(text) is Direction.DECODE:
            return self.decode(text)
        return self.encode(text)

    def convert(
        self, text: str, direction: Optional[Direction] = None
    ) -> ConversionResult:
        start_time = time.time()
        _require_text(text)

        auto_detected = direction is None
        if auto_detected:
            direction = self.detect_direction(text) if text else Direction.ENCODE
        else:
            direction = Direction(direction)

        if direction is Direction.DECODE:
            output = self.decode(text)
        else:
            output = self.encode(text)

        processing_time = time.time() - start_time
        _LOGGER.debug(
            "%s %d codepoints -> %d codepoints (auto=%s) in %.6fs",
            direction.value,
            len(text),
            len(output),
            auto_detected,
            processing_time,
        )
        return ConversionResult(
            source_text=text,
            text=output,
            direction=direction,
            processing_time=processing_time,
            auto_detected=auto_detected,
        )


@lru_cache(maxsize=None)
def get_default_transcoder() -> Transcoder:
    return Transcoder(SGAAlphabet())


def encode(text: str) -> str:
    return get_default_transcoder().encode(text)


def decode(text: str) -> str:
    return get_default_transcoder().decode(text)


def contains_glyph(text: str) -> bool:
    return get_default_transcoder().contains_glyph(text)


def auto_convert(text: str) -> str:
    return get_default_transcoder().auto_convert(text)
