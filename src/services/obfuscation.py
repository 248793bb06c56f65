"""
Classification and masking of contact strings.

A raw string is tried as an email address first, then as a phone number.
The grammars are deliberately simple (not RFC 5322 or E.164):

- Email: exactly one '@', a non-empty local part without whitespace, and a
  domain without whitespace made of non-empty labels around at least one '.'
- Phone: only digits, spaces and a single leading '+', with at least
  MIN_PHONE_DIGITS digits

Masking:
    >>> obfuscate("local-part@domain-name.com")
    'l*****t@domain-name.com'
    >>> obfuscate("+44 123 456 789")
    '+**-***-**6-789'
"""

from domain.errors import ClassificationError
from domain.models import (
    ClassificationKind,
    ClassificationResult,
    EmailAddress,
    PhoneNumber,
)

EMAIL_MASK = '*****'
MIN_PHONE_DIGITS = 9
VISIBLE_PHONE_DIGITS = 4

_DIGITS = frozenset('0123456789')
_PHONE_CHARS = _DIGITS | {' ', '+'}


def _has_whitespace(value: str) -> bool:
    return any(ch.isspace() for ch in value)


def parse_email(raw: str) -> EmailAddress:
    """
    Validate a string against the simplified email grammar.

    Args:
        raw: Candidate email address

    Returns:
        EmailAddress: Parsed address (original case kept)

    Raises:
        ClassificationError: If the string is not an email address
    """
    if raw.count('@') != 1:
        raise ClassificationError(raw, message="Not an email address: expected exactly one '@'")

    local_part, domain = raw.split('@')
    if not local_part or _has_whitespace(local_part):
        raise ClassificationError(raw, message="Not an email address: invalid local part")
    if _has_whitespace(domain) or '.' not in domain or not all(domain.split('.')):
        raise ClassificationError(raw, message="Not an email address: invalid domain")

    return EmailAddress(local_part=local_part, domain=domain)


def parse_phone(raw: str) -> PhoneNumber:
    """
    Validate a string against the simplified phone grammar.

    Args:
        raw: Candidate phone number, e.g. "+44 123 456 789"

    Returns:
        PhoneNumber: Parsed number

    Raises:
        ClassificationError: If the string is not a phone number
    """
    if not raw or any(ch not in _PHONE_CHARS for ch in raw):
        raise ClassificationError(raw, message="Not a phone number: unexpected characters")
    if '+' in raw[1:]:
        raise ClassificationError(raw, message="Not a phone number: '+' is only allowed as the first character")

    digits = ''.join(ch for ch in raw if ch in _DIGITS)
    if len(digits) < MIN_PHONE_DIGITS:
        raise ClassificationError(
            raw,
            message=f"Not a phone number: {len(digits)} digits, at least {MIN_PHONE_DIGITS} required"
        )

    return PhoneNumber(
        raw_digits=digits,
        has_leading_plus=raw.startswith('+'),
        original_layout=tuple(raw),
    )


def mask_email(email: EmailAddress) -> str:
    """
    Mask an email address: lowercase it and hide the inside of the local part.

    The hidden part is always a fixed block of five asterisks, even when
    the local part is only one or two characters long.
    """
    local_part = email.local_part.lower()
    return f"{local_part[0]}{EMAIL_MASK}{local_part[-1]}@{email.domain.lower()}"


def mask_phone(phone: PhoneNumber) -> str:
    """
    Mask a phone number: keep the last four digits, '*' the rest.

    Spaces become '-' and a leading '+' is kept.
    """
    masked_digits = len(phone.raw_digits) - VISIBLE_PHONE_DIGITS
    seen_digits = 0
    output = []

    for ch in phone.original_layout:
        if ch == ' ':
            output.append('-')
        elif ch == '+':
            output.append('+')
        else:
            output.append('*' if seen_digits < masked_digits else ch)
            seen_digits += 1

    return ''.join(output)


def classify(raw: str) -> ClassificationResult:
    """
    Recognise a string as an email or a phone number and mask it.

    Email is tried first. Never raises for string input: unrecognised
    input gives a result with kind UNRECOGNIZED and no masked value.
    """
    try:
        return ClassificationResult(ClassificationKind.EMAIL, mask_email(parse_email(raw)))
    except ClassificationError:
        pass

    try:
        return ClassificationResult(ClassificationKind.PHONE, mask_phone(parse_phone(raw)))
    except ClassificationError:
        return ClassificationResult(ClassificationKind.UNRECOGNIZED)


def obfuscate(raw: str) -> str:
    """
    Mask an email address or a phone number.

    Args:
        raw: Email address or phone number

    Returns:
        str: Masked value

    Raises:
        ClassificationError: If the input is neither (reason UNRECOGNIZED)
        TypeError: If raw is not a string
    """
    if not isinstance(raw, str):
        raise TypeError(f"Expected str, got {type(raw).__name__}")

    result = classify(raw)
    if not result.is_recognized:
        raise ClassificationError(raw, ClassificationError.UNRECOGNIZED)
    return result.masked
