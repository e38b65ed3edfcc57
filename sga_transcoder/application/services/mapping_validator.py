from dataclasses import dataclass
from typing import List, Optional
from sga_transcoder.domain.entities.glyph_mapping import GlyphMapping
from sga_transcoder.infrastructure.mapping.sga_alphabet import GlyphAlphabet, SGAAlphabet


@dataclass
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None


@dataclass
class CorrectionSuggestion:
    latin: str
    glyph: str


class MappingValidator:
    def __init__(self, alphabet: Optional[GlyphAlphabet] = None):
        self._alphabet = alphabet if alphabet is not None else SGAAlphabet()

    def validate_mapping(self, mapping: GlyphMapping) -> ValidationResult:
        # Check if glyph sequence is known
        if not self._alphabet.is_valid_glyph(mapping.glyph):
            return ValidationResult(
                is_valid=False,
                error=f"Unknown glyph sequence: {mapping.glyph}",
            )

        # Check if mapping is correct
        expected_latin = self._alphabet.get_latin_equivalent(mapping.glyph)
        if expected_latin != mapping.latin:
            return ValidationResult(
                is_valid=False,
                error=f"Glyph sequence {mapping.glyph} does not match expected mapping. Expected: {expected_latin}, Got: {mapping.latin}",
            )

        return ValidationResult(is_valid=True)

    def validate_batch(self, mappings: List[GlyphMapping]) -> List[ValidationResult]:
        return [self.validate_mapping(mapping) for mapping in mappings]

    def get_correction_suggestion(
        self, mapping: GlyphMapping
    ) -> Optional[CorrectionSuggestion]:
        # Can only suggest correction if we know the glyph sequence
        if not self._alphabet.is_valid_glyph(mapping.glyph):
            return None

        correct_latin = self._alphabet.get_latin_equivalent(mapping.glyph)

        if correct_latin == mapping.latin:
            return None

        return CorrectionSuggestion(latin=correct_latin, glyph=mapping.glyph)

    def audit_alphabet(self) -> List[str]:
        findings = []
        for glyph, letters in self._alphabet.find_collisions().items():
            findings.append(
                f"Glyph sequence {glyph} is shared by {', '.join(letters)}; decodes to {letters[0]}"
            )
        return findings
