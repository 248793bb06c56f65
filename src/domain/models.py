"""
Data models for the form field utilities.

These type-safe data structures define clear contracts between components.
Validated value types (EmailAddress, PhoneNumber) are only built by the
parse functions in services.obfuscation, so masking code never has to
re-check the grammar.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Dict, Tuple, Union


class Weekday(IntEnum):
    """Day of the week, numbered like datetime.date.weekday()."""
    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @classmethod
    def parse(cls, value: Union['Weekday', int, str]) -> 'Weekday':
        """
        Convert a weekday given as a member, a number or an English name.

        Args:
            value: Weekday member, int 0-6 (Monday is 0), or a name such as
                "Sun", "sun" or "Sunday"

        Returns:
            Weekday: The matching member

        Raises:
            ValueError: If the value does not name a weekday
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a weekday: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            for member in cls:
                if name in (member.name, _FULL_NAMES[member]):
                    return member
        raise ValueError(f"Not a weekday: {value!r}")


_FULL_NAMES = {
    Weekday.MON: 'MONDAY',
    Weekday.TUE: 'TUESDAY',
    Weekday.WED: 'WEDNESDAY',
    Weekday.THU: 'THURSDAY',
    Weekday.FRI: 'FRIDAY',
    Weekday.SAT: 'SATURDAY',
    Weekday.SUN: 'SUNDAY',
}


@dataclass(frozen=True)
class EmailAddress:
    """
    Email address in simplified local-part@domain form.

    Attributes:
        local_part: Text before the '@' (non-empty, no whitespace)
        domain: Text after the '@' (dot-separated, non-empty labels)
    """
    local_part: str
    domain: str


@dataclass(frozen=True)
class PhoneNumber:
    """
    Phone number made of digits, spaces and an optional leading '+'.

    Attributes:
        raw_digits: Digit characters in their original order
        has_leading_plus: Whether the number starts with '+'
        original_layout: Every original character, in order
    """
    raw_digits: str
    has_leading_plus: bool
    original_layout: Tuple[str, ...]


class ClassificationKind(Enum):
    """What a raw contact string was recognised as."""
    EMAIL = 'email'
    PHONE = 'phone'
    UNRECOGNIZED = 'unrecognized'


@dataclass(frozen=True)
class ClassificationResult:
    """
    Outcome of classifying one raw string.

    Attributes:
        kind: EMAIL, PHONE or UNRECOGNIZED
        masked: Masked rendering (None when UNRECOGNIZED)
    """
    kind: ClassificationKind
    masked: Optional[str] = None

    @property
    def is_recognized(self) -> bool:
        return self.kind is not ClassificationKind.UNRECOGNIZED


@dataclass
class FormSubmission:
    """
    A submitted form as delivered through SQS.

    Attributes:
        submission_id: Unique submission identifier (falls back to the SQS message ID)
        form_id: Identifier of the form that was filled in
        fields: Field name -> raw submitted value
        received_at: ISO 8601 timestamp of the submission (may be empty)
    """
    submission_id: str
    form_id: str
    fields: Dict[str, str] = field(default_factory=dict)
    received_at: str = ''


@dataclass
class ProcessingResult:
    """
    Result of processing one form submission.

    This explicit result type makes success/failure handling clear
    and prevents exceptions from being used for control flow.

    Attributes:
        success: Whether every contact field was masked and the record was handled
        message_id: SQS message identifier
        submission: Parsed submission (if parsing succeeded)
        masked_fields: Contact field name -> masked value
        rejected_fields: Contact fields that were neither email nor phone
        archive_key: S3 key of the archived masked submission (if archived)
        error_message: Error description (if processing failed)
    """
    success: bool
    message_id: str
    submission: Optional[FormSubmission] = None
    masked_fields: Dict[str, str] = field(default_factory=dict)
    rejected_fields: List[str] = field(default_factory=list)
    archive_key: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def should_delete_message(self) -> bool:
        """Always True - masking is deterministic, so a retry cannot change the outcome."""
        return True

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.success:
            return f"ProcessingResult(success=True, message_id={self.message_id})"
        else:
            return f"ProcessingResult(success=False, message_id={self.message_id}, error={self.error_message})"
