"""
S3 archive for masked form submissions.

Only masked values ever reach this module. Archiving is optional: it is
skipped unless MASKED_SUBMISSIONS_BUCKET is set.
"""

import os
import json
import logging
import re
from typing import Optional, Dict, Any

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

# Configure S3 client with timeouts to prevent infinite hangs
s3_config = Config(
    retries={
        'max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,
    read_timeout=30
)

# Initialize S3 client at module level (thread-safe, reused across invocations)
s3_client = boto3.client('s3', config=s3_config)

# Configuration from environment
MASKED_SUBMISSIONS_BUCKET = os.environ.get('MASKED_SUBMISSIONS_BUCKET', '')
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')


def is_configured() -> bool:
    """
    Check if archiving is configured.

    Returns:
        True if the archive bucket is set
    """
    return bool(MASKED_SUBMISSIONS_BUCKET)


def archive_masked_submission(submission_id: str, payload: Dict[str, Any]) -> Optional[str]:
    """
    Write a masked submission to S3 as JSON.

    Args:
        submission_id: Submission identifier (used in the object key)
        payload: JSON-serialisable masked submission

    Returns:
        S3 object key, or None if archiving is not configured

    Raises:
        ValueError: If submission_id is empty
        ClientError: If the S3 upload fails

    Example:
        >>> archive_masked_submission("sub-1", {"fields": {"email": "j*****e@example.com"}})
        'masked-submissions/dev/sub-1.json'
    """
    if not is_configured():
        logger.info("Masked submission archive not configured, skipping")
        return None

    if not submission_id:
        raise ValueError("Submission ID cannot be empty")

    key = f"masked-submissions/{ENVIRONMENT}/{_sanitize_for_s3_key(submission_id)}.json"
    body = json.dumps(payload, sort_keys=True)

    try:
        s3_client.put_object(
            Bucket=MASKED_SUBMISSIONS_BUCKET,
            Key=key,
            Body=body.encode('utf-8'),
            ContentType='application/json'
        )
        logger.info(f"Archived masked submission: s3://{MASKED_SUBMISSIONS_BUCKET}/{key}")
        return key

    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code', 'Unknown')
        logger.error(
            f"Failed to archive masked submission: "
            f"bucket={MASKED_SUBMISSIONS_BUCKET}, key={key}, error_code={error_code}"
        )
        raise


def _sanitize_for_s3_key(value: str) -> str:
    """
    Sanitize a string for use in S3 object keys.

    Args:
        value: String to sanitize

    Returns:
        Sanitized string safe for S3 keys
    """
    result = value.strip('<>')
    result = re.sub(r'[/\\#?&%]', '_', result)
    result = re.sub(r'[\x00-\x1f\x7f]', '', result)
    return result
