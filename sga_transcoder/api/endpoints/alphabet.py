from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List, Optional
from sga_transcoder.application.services.mapping_validator import MappingValidator
from sga_transcoder.domain.entities.glyph_mapping import GlyphMapping
from sga_transcoder.infrastructure.mapping.sga_alphabet import SGAAlphabet


router = APIRouter()


class MappingModel(BaseModel):
    latin: str
    glyph: str


class AlphabetResponse(BaseModel):
    mappings: List[MappingModel]
    max_sequence_length: int


class ValidateRequest(BaseModel):
    mappings: List[MappingModel]


class MappingValidationResponse(BaseModel):
    latin: str
    glyph: str
    is_valid: bool
    error: Optional[str] = None
    suggestion: Optional[str] = None


class ValidateResponse(BaseModel):
    results: List[MappingValidationResponse]


@router.get("", response_model=AlphabetResponse)
async def get_alphabet():
    alphabet = SGAAlphabet()
    return AlphabetResponse(
        mappings=[
            MappingModel(latin=latin, glyph=glyph)
            for latin, glyph in alphabet.get_all_mappings().items()
        ],
        max_sequence_length=alphabet.max_sequence_length,
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate_mappings(request: ValidateRequest):
    try:
        mappings = [GlyphMapping(item.latin, item.glyph) for item in request.mappings]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    validator = MappingValidator()
    results = []
    for mapping, validation in zip(mappings, validator.validate_batch(mappings)):
        suggestion = validator.get_correction_suggestion(mapping)
        results.append(
            MappingValidationResponse(
                latin=mapping.latin,
                glyph=mapping.glyph,
                is_valid=validation.is_valid,
                error=validation.error,
                suggestion=suggestion.latin if suggestion else None,
            )
        )
    return ValidateResponse(results=results)
