"""
Tests for email/phone classification and masking.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.errors import ClassificationError
from domain.models import ClassificationKind, EmailAddress, PhoneNumber
from services.obfuscation import (
    classify,
    mask_email,
    mask_phone,
    obfuscate,
    parse_email,
    parse_phone,
)


class TestParseEmail:
    """Test the simplified email grammar."""

    def test_valid_email(self):
        email = parse_email("local-part@domain-name.com")

        assert email == EmailAddress(local_part="local-part", domain="domain-name.com")

    def test_keeps_original_case(self):
        email = parse_email("John.Doe@Example.COM")

        assert email.local_part == "John.Doe"
        assert email.domain == "Example.COM"

    def test_permissive_local_part(self):
        assert parse_email("a+b!#$%@x.io").local_part == "a+b!#$%"

    @pytest.mark.parametrize("value", [
        "no-at-sign.com",
        "two@@example.com",
        "a@b@example.com",
        "@example.com",
        "user@",
        "user@localhost",
        "user@.com",
        "user@example.",
        "user@example..com",
        "us er@example.com",
        "user@exa mple.com",
        "user@example.com ",
        "\tuser@example.com",
        "",
    ])
    def test_invalid_emails(self, value):
        with pytest.raises(ClassificationError):
            parse_email(value)


class TestMaskEmail:
    """Test email masking."""

    def test_hides_inside_of_local_part(self):
        assert obfuscate("local-part@domain-name.com") == "l*****t@domain-name.com"

    @pytest.mark.parametrize("local_part,expected", [
        ("abc", "a*****c"),
        ("abcdefghijk", "a*****k"),
        ("ab", "a*****b"),
        ("a", "a*****a"),
    ])
    def test_fixed_size_mask(self, local_part, expected):
        """Test mask is always five asterisks, whatever the local part length."""
        email = EmailAddress(local_part=local_part, domain="domain.com")

        assert mask_email(email) == f"{expected}@domain.com"

    def test_lowercases_everything(self):
        assert obfuscate("John.DOE@Example.COM") == "j*****e@example.com"

    def test_domain_is_kept(self):
        for value in ["x@a.b", "Name@Sub.Domain.co.uk", "q-1@my-host.example.org"]:
            masked = obfuscate(value)
            assert masked.split('@')[1] == value.split('@')[1].lower()


class TestParsePhone:
    """Test the simplified phone grammar."""

    def test_valid_phone(self):
        phone = parse_phone("+44 123 456 789")

        assert phone.raw_digits == "44123456789"
        assert phone.has_leading_plus is True
        assert phone.original_layout == tuple("+44 123 456 789")

    def test_without_plus(self):
        phone = parse_phone("123456789")

        assert phone.has_leading_plus is False
        assert phone.raw_digits == "123456789"

    @pytest.mark.parametrize("value", [
        "12345678",             # only 8 digits
        "+1 234 567",
        "44+123456789",         # interior plus
        "+44 123 +456 789",
        "++44123456789",        # repeated plus
        "123456789+",
        " +44123456789",        # plus not first
        "(044) 123-456-789",
        "044.123.456.789",
        "１２３４５６７８９",      # full-width digits
        "",
        "         ",
    ])
    def test_invalid_phones(self, value):
        with pytest.raises(ClassificationError):
            parse_phone(value)


class TestMaskPhone:
    """Test phone masking."""

    def test_international_number(self):
        assert obfuscate("+44 123 456 789") == "+**-***-**6-789"

    def test_protected_digits_span_groups(self):
        assert obfuscate("+7 999 123 45 67") == "+*-***-***-45-67"

    def test_minimum_length(self):
        assert obfuscate("123456789") == "*****6789"

    def test_every_space_becomes_dash(self):
        assert obfuscate("12  345 6789 ") == "**--***-6789-"

    def test_plus_alone_followed_by_space(self):
        assert obfuscate("+ 123456789") == "+-*****6789"

    def test_mask_phone_value_type(self):
        phone = PhoneNumber(
            raw_digits="0123456789",
            has_leading_plus=False,
            original_layout=tuple("012 345 6789"),
        )

        assert mask_phone(phone) == "***-***-6789"


class TestClassify:
    """Test classification order and results."""

    def test_email(self):
        result = classify("abc@example.com")

        assert result.kind is ClassificationKind.EMAIL
        assert result.masked == "a*****c@example.com"
        assert result.is_recognized is True

    def test_phone(self):
        result = classify("123456789")

        assert result.kind is ClassificationKind.PHONE
        assert result.masked == "*****6789"

    def test_unrecognized(self):
        result = classify("not-an-email-or-phone!")

        assert result.kind is ClassificationKind.UNRECOGNIZED
        assert result.masked is None
        assert result.is_recognized is False


class TestObfuscate:
    """Test the public obfuscate entry point."""

    @pytest.mark.parametrize("value", [
        "12345678",
        "not-an-email-or-phone!",
        "44+123456789",
        "user@localhost",
        "",
    ])
    def test_unrecognized_input(self, value):
        with pytest.raises(ClassificationError) as exc_info:
            obfuscate(value)

        assert exc_info.value.reason == ClassificationError.UNRECOGNIZED
        assert exc_info.value.value == value

    def test_error_message_does_not_echo_input(self):
        with pytest.raises(ClassificationError) as exc_info:
            obfuscate("secret value 42")

        assert "secret" not in str(exc_info.value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            obfuscate("nope")

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            obfuscate(123456789)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
