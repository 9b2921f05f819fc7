"""Tests for variable value formatting."""

import pytest

from varbind.formatting import format_value, rgb_to_hex
from varbind.model import Color, ResolvedType


class TestColorFormatting:
    """Colors render as lowercase hex with alpha only when not opaque."""

    def test_opaque_color_has_six_hex_digits(self):
        assert format_value(ResolvedType.COLOR, Color(1, 0, 0, 1)) == '#ff0000'

    def test_translucent_color_rounds_half_up(self):
        """0.5 * 255 = 127.5 rounds to 128 (0x80)."""
        assert format_value(ResolvedType.COLOR, Color(1, 0, 0, 0.5)) == '#ff000080'

    def test_rgb_only_record_is_opaque(self):
        assert format_value(ResolvedType.COLOR, Color(0, 0, 1)) == '#0000ff'

    def test_channels_are_zero_padded(self):
        assert rgb_to_hex(Color(0, 0.5, 1, 0)) == '#0080ff00'

    @pytest.mark.parametrize('alpha', [0, 0.25, 0.5, 0.99])
    def test_non_opaque_alpha_gives_eight_hex_digits(self, alpha):
        result = format_value(ResolvedType.COLOR, Color(0.2, 0.4, 0.6, alpha))
        assert result.startswith('#')
        assert len(result) == 9

    @pytest.mark.parametrize('color', [Color(0.2, 0.4, 0.6, 1), Color(0.2, 0.4, 0.6)])
    def test_opaque_gives_six_hex_digits(self, color):
        assert len(format_value(ResolvedType.COLOR, color)) == 7

    def test_out_of_range_channels_are_clamped(self):
        assert rgb_to_hex(Color(1.5, -0.2, 0, 1)) == '#ff0000'

    def test_accepts_plain_string_type(self):
        assert format_value('COLOR', Color(1, 1, 1, 1)) == '#ffffff'


class TestScalarFormatting:
    """Scalars render in their natural form."""

    def test_integral_float_drops_fraction(self):
        assert format_value(ResolvedType.FLOAT, 16.0) == '16'

    def test_fractional_float(self):
        assert format_value(ResolvedType.FLOAT, 1.5) == '1.5'

    def test_int(self):
        assert format_value(ResolvedType.FLOAT, 8) == '8'

    def test_boolean_is_lowercase(self):
        assert format_value(ResolvedType.BOOLEAN, True) == 'true'
        assert format_value(ResolvedType.BOOLEAN, False) == 'false'

    def test_string_passes_through(self):
        assert format_value(ResolvedType.STRING, 'Inter') == 'Inter'

    def test_non_color_value_of_color_variable_uses_string_form(self):
        assert format_value(ResolvedType.COLOR, 'red') == 'red'
