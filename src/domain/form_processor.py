"""
Form submission masking pipeline - core business logic.

This module handles the end-to-end processing of form submissions from SQS:
1. Parse the submission from the SQS record body
2. Mask every contact field (email address or phone number)
3. Archive the masked submission to S3 (if configured)
4. Return result (success or failure)

Contact fields that are neither an email nor a phone number are rejected
and left out of the masked output. Raw contact values are never logged.

All errors are caught and returned as ProcessingResult with success=False.
No exceptions propagate out of the public methods.
"""

import json
import logging
import os
from typing import Dict, Any, Iterable, List, Optional, Tuple

from .models import FormSubmission, ProcessingResult
from services import obfuscation
from services import s3 as s3_service

logger = logging.getLogger(__name__)

DEFAULT_MASKED_FIELDS = 'email,phone,contact'


def _parse_field_names(value: str) -> frozenset:
    return frozenset(name.strip().lower() for name in value.split(',') if name.strip())


class FormProcessor:
    """
    Masks the contact fields of form submissions.

    Returns ProcessingResult for explicit success/failure handling.
    """

    def __init__(self, masked_fields: Optional[Iterable[str]] = None):
        """
        Initialize form processor.

        Args:
            masked_fields: Names of the contact fields to mask (case-insensitive).
                Defaults to the MASKED_FIELDS environment variable.
        """
        if masked_fields is None:
            self.masked_fields = _parse_field_names(
                os.environ.get('MASKED_FIELDS', DEFAULT_MASKED_FIELDS)
            )
        else:
            self.masked_fields = frozenset(name.lower() for name in masked_fields)

    def process_record(self, record: Dict[str, Any]) -> ProcessingResult:
        """
        Process a single SQS record containing a form submission.

        Args:
            record: SQS record dict

        Returns:
            ProcessingResult with success=True or success=False (errors logged)
        """
        message_id = record.get('messageId', 'UNKNOWN')
        logger.info(f"Processing SQS message: {message_id}")

        try:
            submission = self._parse_submission(record)
            logger.info(
                f"Parsed: submission={submission.submission_id}, form={submission.form_id}, "
                f"fields={len(submission.fields)}"
            )

            masked_fields, rejected_fields = self.mask_contact_fields(submission)

            archive_key = s3_service.archive_masked_submission(
                submission.submission_id,
                self._masked_payload(submission, masked_fields)
            )

            if rejected_fields:
                logger.warning(
                    f"Submission {submission.submission_id}: unrecognized contact "
                    f"field(s) dropped: {', '.join(rejected_fields)}"
                )
                return ProcessingResult(
                    success=False,
                    message_id=message_id,
                    submission=submission,
                    masked_fields=masked_fields,
                    rejected_fields=rejected_fields,
                    archive_key=archive_key,
                    error_message=f"Unrecognized contact field(s): {', '.join(rejected_fields)}"
                )

            logger.info(f"Masked {len(masked_fields)} contact field(s) for {submission.submission_id}")

            return ProcessingResult(
                success=True,
                message_id=message_id,
                submission=submission,
                masked_fields=masked_fields,
                archive_key=archive_key
            )

        except Exception as e:
            logger.error(f"Failed to process {message_id}: {e}", exc_info=True)

            return ProcessingResult(
                success=False,
                message_id=message_id,
                error_message=str(e)
            )

    def mask_contact_fields(self, submission: FormSubmission) -> Tuple[Dict[str, str], List[str]]:
        """
        Mask the contact fields of a submission.

        Args:
            submission: Parsed form submission

        Returns:
            Tuple of (field name -> masked value, list of rejected field names).
            Fields not listed in masked_fields are ignored.
        """
        masked = {}
        rejected = []

        for name, value in submission.fields.items():
            if name.lower() not in self.masked_fields:
                continue

            result = obfuscation.classify(value.strip())
            if result.is_recognized:
                masked[name] = result.masked
                logger.debug(f"Field {name} masked as {result.kind.value}: {result.masked}")
            else:
                rejected.append(name)

        return masked, rejected

    def _parse_submission(self, record: Dict[str, Any]) -> FormSubmission:
        """
        Parse SQS record body into a FormSubmission.

        Args:
            record: SQS record dict

        Returns:
            FormSubmission: Structured submission

        Raises:
            ValueError: If the body is not a valid submission
            json.JSONDecodeError: If JSON parsing fails
        """
        body = json.loads(record['body'])
        if not isinstance(body, dict):
            raise ValueError("Form submission body must be a JSON object")

        fields = body.get('fields')
        if not isinstance(fields, dict):
            raise ValueError("Form submission missing 'fields' object")

        return FormSubmission(
            submission_id=str(body.get('submissionId') or record.get('messageId', 'UNKNOWN')),
            form_id=str(body.get('formId', '')),
            fields={str(k): '' if v is None else str(v) for k, v in fields.items()},
            received_at=str(body.get('receivedAt', ''))
        )

    def _masked_payload(
        self,
        submission: FormSubmission,
        masked_fields: Dict[str, str]
    ) -> Dict[str, Any]:
        """Build the archive document: non-contact fields as submitted, contact fields masked."""
        fields = {
            name: value
            for name, value in submission.fields.items()
            if name.lower() not in self.masked_fields
        }
        fields.update(masked_fields)

        return {
            'submissionId': submission.submission_id,
            'formId': submission.form_id,
            'receivedAt': submission.received_at,
            'fields': fields,
        }
