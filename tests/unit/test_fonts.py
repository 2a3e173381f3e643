"""
Тесты для модуля fonts
"""

import pytest

from modkit.ui.fonts import FontDescriptor, FontWeight, TextStyle, preferred_font


class TestTextStyle:
    @pytest.mark.parametrize(
        "style,size",
        [
            (TextStyle.LARGE_TITLE, 34),
            (TextStyle.TITLE1, 28),
            (TextStyle.TITLE2, 22),
            (TextStyle.TITLE3, 20),
            (TextStyle.HEADLINE, 17),
            (TextStyle.BODY, 17),
            (TextStyle.CALLOUT, 16),
            (TextStyle.SUBHEADLINE, 15),
            (TextStyle.FOOTNOTE, 13),
            (TextStyle.CAPTION1, 12),
            (TextStyle.CAPTION2, 11),
        ],
    )
    def test_point_sizes(self, style: TextStyle, size: float) -> None:
        assert style.point_size == size


class TestPreferredFont:
    """Тесты preferred_font"""

    def test_defaults(self) -> None:
        font = preferred_font(TextStyle.BODY)
        assert font == FontDescriptor(point_size=17, weight=FontWeight.REGULAR, text_style=TextStyle.BODY)
        assert not font.italic

    def test_weight_and_italic(self) -> None:
        font = preferred_font(TextStyle.HEADLINE, FontWeight.BOLD, italic=True)
        assert (font.point_size, font.weight, font.italic) == (17, FontWeight.BOLD, True)

    def test_builders(self) -> None:
        font = preferred_font(TextStyle.CAPTION2).with_weight(FontWeight.HEAVY).with_italic()
        assert font.weight is FontWeight.HEAVY
        assert font.italic
        assert font.text_style is TextStyle.CAPTION2

    def test_point_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            FontDescriptor(point_size=0)
