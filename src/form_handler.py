"""
AWS Lambda handler for masking form submissions delivered through SQS.

Thin orchestration layer that delegates to FormProcessor.
Policy: Always delete messages (no retries). Errors logged to CloudWatch.
"""

import logging
import os
from typing import Dict, Any

from domain.form_processor import FormProcessor

# Configure logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Initialize processor once at module level (reused across invocations)
form_processor = FormProcessor()


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Mask the contact fields of form submissions from SQS.

    Args:
        event: Lambda event with SQS records
        context: Lambda context

    Returns:
        Dict with batchItemFailures (always empty - no retries)
    """
    records = event.get('Records', [])
    logger.info(f"Processing batch of {len(records)} form submission(s)")

    results = []
    for record in records:
        result = form_processor.process_record(record)
        results.append(result)

        if result.success:
            logger.info(f"Masked submission in message {result.message_id}")
        else:
            logger.warning(
                f"Processed message {result.message_id} with ERRORS: "
                f"{result.error_message}"
            )

    success_count = sum(1 for r in results if r.success)
    logger.info(
        f"Batch processing complete: {len(results)} message(s), "
        f"success={success_count}, errors={len(results) - success_count}"
    )

    return {"batchItemFailures": []}
