"""Unit tests for variant name parsing."""

from figsync.core.variants import parse_variant_name


class TestParseVariantName:
    """Tests for parse_variant_name."""

    def test_two_pairs(self) -> None:
        """Test a well-formed name with two properties."""
        result = parse_variant_name("Size=Large, State=Hover")
        assert result.properties == {"Size": "Large", "State": "Hover"}
        assert result.dropped == 0

    def test_single_pair(self) -> None:
        """Test a name with one property."""
        assert parse_variant_name("Size=Small").properties == {"Size": "Small"}

    def test_malformed_segment_dropped(self) -> None:
        """Test that a segment without '=' is dropped and the rest still parses."""
        result = parse_variant_name("Size=Large, Broken")
        assert result.properties == {"Size": "Large"}
        assert result.dropped == 1

    def test_whitespace_trimmed(self) -> None:
        """Test trimming around keys and values."""
        result = parse_variant_name("  Size =  Large ,State= Hover  ")
        assert result.properties == {"Size": "Large", "State": "Hover"}

    def test_empty_key_or_value(self) -> None:
        """Test that pairs with an empty side are dropped."""
        result = parse_variant_name("=Large, Size=, State=On")
        assert result.properties == {"State": "On"}
        assert result.dropped == 2

    def test_split_on_first_equals(self) -> None:
        """Test that only the first '=' separates key and value."""
        assert parse_variant_name("Ratio=16=9").properties == {"Ratio": "16=9"}

    def test_repeated_key_keeps_last(self) -> None:
        """Test duplicate keys."""
        assert parse_variant_name("Size=Large, Size=Small").properties == {"Size": "Small"}

    def test_plain_name(self) -> None:
        """Test a name that is not in key=value form at all."""
        result = parse_variant_name("Default")
        assert result.properties == {}
        assert result.dropped == 1

    def test_key_order_preserved(self) -> None:
        """Test that properties keep the order of the name."""
        result = parse_variant_name("State=Hover, Size=Large")
        assert list(result.properties) == ["State", "Size"]
