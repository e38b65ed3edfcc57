"""Latin <-> Standard Galactic Alphabet transcoder."""

__version__ = "0.1.0"

from sga_transcoder.application.services.transcoder import (  # noqa: E402
    Transcoder,
    auto_convert,
    contains_glyph,
    decode,
    encode,
)
from sga_transcoder.infrastructure.mapping.sga_alphabet import GlyphAlphabet, SGAAlphabet  # noqa: E402

__all__ = [
    "GlyphAlphabet",
    "SGAAlphabet",
    "Transcoder",
    "auto_convert",
    "contains_glyph",
    "decode",
    "encode",
]
