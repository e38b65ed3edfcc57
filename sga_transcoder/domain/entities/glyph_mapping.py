from dataclasses import dataclass
import re


@dataclass(frozen=True)
class GlyphMapping:
    latin: str
    glyph: str

    def __post_init__(self):
        self._validate()

    def _validate(self):
        if not isinstance(self.latin, str) or not re.fullmatch(r"[A-Z]", self.latin):
            raise ValueError("Latin letter must be a single uppercase character A-Z")

        if not isinstance(self.glyph, str) or not self.glyph:
            raise ValueError("Glyph sequence must be a non-empty string")

    def __str__(self):
        return f"GlyphMapping({self.latin} → {self.glyph})"

    def to_dict(self) -> dict:
        return {"latin": self.latin, "glyph": self.glyph}
