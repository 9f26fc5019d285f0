# =============================================================================
# Tests for tracking number classification
# =============================================================================
# Run: python -m pytest tests/test_classifier.py -v
# =============================================================================

import pytest

from freight_tracking.services.carriers import CARRIER_PREFIXES
from freight_tracking.services.classifier import (
    classify,
    clean_tracking_number,
    detect_shipping_line,
    sealine_code,
    searates_type,
)


class TestCleanTrackingNumber:

    def test_trims_uppercases_and_strips_separators(self):
        assert clean_tracking_number("  maeu 123-4567 ") == "MAEU1234567"

    def test_strips_inner_tabs(self):
        assert clean_tracking_number("MSCU\t7654321") == "MSCU7654321"

    def test_non_string_is_empty(self):
        assert clean_tracking_number(None) == ""


class TestContainerNumbers:

    @pytest.mark.parametrize("number", [
        "MAEU1234567",   # 4 + 7
        "ABCD123456",    # 4 + 6
        "ZZZZ12345678",  # 4 + 8, check digit
    ])
    def test_container_layout_is_container_even_for_unknown_owner(self, number):
        info = classify(number)
        assert info.type == "container"
        assert info.is_valid is True

    def test_maersk_container(self):
        info = classify("MAEU1234567")
        assert info.type == "container"
        assert info.shipping_line == "maersk"
        assert info.prefix == "MAEU"

    def test_lowercase_with_separators(self):
        info = classify("hlxu-123 4567")
        assert info.type == "container"
        assert info.shipping_line == "hapag-lloyd"

    def test_container_beats_booking(self):
        # 11 alphanumerics also fit the booking layout
        assert classify("OOLU1234567").type == "container"


class TestBillOfLading:

    def test_four_letters_nine_digits(self):
        info = classify("MAEU123456789")
        assert info.type == "bl"
        assert info.shipping_line == "maersk"

    def test_two_letters_eight_digits(self):
        assert classify("AB12345678").type == "bl"

    def test_numeric_only(self):
        info = classify("1234567890")
        assert info.type == "bl"
        assert info.shipping_line is None
        assert info.prefix == "1234"

    def test_bl_beats_booking(self):
        # 10 digits also matches the alphanumeric booking layout
        assert classify("9876543210").type == "bl"


class TestBooking:

    def test_short_alphanumeric_reference(self):
        info = classify("ABC123")
        assert info.type == "booking"
        assert info.is_valid is True

    def test_mixed_reference(self):
        assert classify("EBKG0012AB").type == "booking"

    def test_five_digit_tail_is_booking(self):
        assert classify("XXXX99999").type == "booking"


class TestUnknown:

    def test_short_is_invalid(self):
        info = classify("short")
        assert info.type == "unknown"
        assert info.is_valid is False

    def test_long_unmatched_is_still_valid(self):
        info = classify("ABCDEFGHIJKLMN")
        assert info.type == "unknown"
        assert info.is_valid is True

    def test_punctuation_keeps_it_unknown(self):
        info = classify("MAEU#12345")
        assert info.type == "unknown"
        assert info.shipping_line == "maersk"
        assert info.is_valid is True

    def test_empty_and_none(self):
        for raw in ("", "   ", None):
            info = classify(raw)
            assert info.type == "unknown"
            assert info.prefix == ""
            assert info.is_valid is False
            assert info.shipping_line is None


class TestPrefixAndShippingLine:

    @pytest.mark.parametrize("raw", [
        "maeu1234567", " ab-12 ", "x", "1234567890123", "CMAU 123 456 7",
    ])
    def test_prefix_is_first_four_cleaned_chars(self, raw):
        cleaned = raw.strip().upper().replace(" ", "").replace("-", "")
        assert classify(raw).prefix == cleaned[:4]

    @pytest.mark.parametrize("prefix,slug", sorted(CARRIER_PREFIXES.items()))
    def test_every_table_prefix_resolves(self, prefix, slug):
        assert detect_shipping_line(prefix) == slug

    def test_secondary_codes(self):
        assert classify("MEDU1234567").shipping_line == "msc"
        assert classify("CBHU1234567").shipping_line == "cosco"
        assert classify("UASU1234567").shipping_line == "uasc"

    def test_unmapped_prefix(self):
        assert classify("TGHU1234567").shipping_line is None


class TestSearatesType:

    def test_hints(self):
        assert searates_type(classify("MAEU1234567")) == "CT"
        assert searates_type(classify("MAEU123456789")) == "BL"
        assert searates_type(classify("ABC123")) == "BK"
        assert searates_type(classify("short")) is None


class TestSealineCode:

    @pytest.mark.parametrize("slug, scac", [
        ("maersk", "MAEU"),
        ("msc", "MSCU"),
        ("hapag-lloyd", "HLCU"),
        ("wan-hai", "WHLC"),
    ])
    def test_known_lines(self, slug, scac):
        assert sealine_code(slug) == scac

    def test_detected_line_maps_to_scac(self):
        assert sealine_code(classify("MAEU1234567").shipping_line) == "MAEU"

    @pytest.mark.parametrize("slug", [None, "", "blue-star", "not-a-line"])
    def test_no_code(self, slug):
        assert sealine_code(slug) is None
