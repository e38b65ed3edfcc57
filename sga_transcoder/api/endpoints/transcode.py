from fastapi import APIRouter
from pydantic import BaseModel
from typing import Optional
from sga_transcoder.application.services.transcoder import Transcoder
from sga_transcoder.domain.entities.conversion_result import ConversionResult, Direction


router = APIRouter()


class TextRequest(BaseModel):
    text: str


class ConversionResponse(BaseModel):
    source_text: str
    text: str
    direction: Direction
    auto_detected: bool
    processing_time: float


def _run(text: str, direction: Optional[Direction]) -> ConversionResponse:
    transcoder = Transcoder()
    result: ConversionResult = transcoder.convert(text, direction)
    return ConversionResponse(
        source_text=result.source_text,
        text=result.text,
        direction=result.direction,
        auto_detected=result.auto_detected,
        processing_time=result.processing_time,
    )


@router.post("/encode", response_model=ConversionResponse)
async def encode_text(request: TextRequest):
    return _run(request.text, Direction.ENCODE)


@router.post("/decode", response_model=ConversionResponse)
async def decode_text(request: TextRequest):
    return _run(request.text, Direction.DECODE)


@router.post("/auto", response_model=ConversionResponse)
async def auto_convert_text(request: TextRequest):
    return _run(request.text, None)
