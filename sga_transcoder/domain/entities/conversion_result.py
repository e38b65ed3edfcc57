from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Direction(str, Enum):
    ENCODE = "encode"
    DECODE = "decode"


@dataclass
class ConversionResult:
    source_text: str
    text: str
    direction: Direction
    processing_time: float
    auto_detected: bool = False
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def changed(self) -> bool:
        return self.text != self.source_text

    def to_dict(self) -> dict:
        return {
            "source_text": self.source_text,
            "text": self.text,
            "direction": self.direction.value,
            "auto_detected": self.auto_detected,
            "processing_time": self.processing_time,
            "timestamp": self.timestamp.isoformat(),
        }
