from datetime import datetime
from sga_transcoder.domain.entities.conversion_result import ConversionResult, Direction


class TestConversionResult:
    def test_create_conversion_result(self):
        result = ConversionResult(
            source_text="CAB",
            text="ᓵᔑʖ",
            direction=Direction.ENCODE,
            processing_time=0.001,
        )

        assert result.source_text == "CAB"
        assert result.text == "ᓵᔑʖ"
        assert result.direction is Direction.ENCODE
        assert result.auto_detected is False
        assert isinstance(result.timestamp, datetime)

    def test_changed_property(self):
        assert ConversionResult("ab", "ᔑʖ", Direction.ENCODE, 0.0).changed is True
        assert ConversionResult("123", "123", Direction.ENCODE, 0.0).changed is False

    def test_direction_values(self):
        assert Direction("encode") is Direction.ENCODE
        assert Direction.DECODE.value == "decode"

    def test_conversion_result_to_dict(self):
        result = ConversionResult("ᔑ", "A", Direction.DECODE, 0.25, auto_detected=True)
        result_dict = result.to_dict()

        assert result_dict["source_text"] == "ᔑ"
        assert result_dict["text"] == "A"
        assert result_dict["direction"] == "decode"
        assert result_dict["auto_detected"] is True
        assert result_dict["processing_time"] == 0.25
        assert "timestamp" in result_dict
