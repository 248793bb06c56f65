"""
AWS Lambda handler for direct invocation of the form field utilities.

Expected event format:
{
    "operation": "ordinal" | "count_weekday" | "obfuscate",
    ...operation arguments...
}
"""

import json
import os
import logging
from typing import Dict, Any, Callable

from domain.errors import FormUtilsError
from services import ordinal as ordinal_service
from services import weekdays as weekday_service
from services import obfuscation as obfuscation_service

# Configure logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())

# Environment variables
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')


def _ordinal(event: Dict[str, Any]) -> str:
    """{"value": 21, "strict": false} -> "21st"."""
    if 'value' not in event:
        raise ValueError("value is required")
    value = event['value']
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("value must be an integer")

    if event.get('strict', False):
        return ordinal_service.format_positive_ordinal(value)
    return ordinal_service.format_ordinal(value)


def _count_weekday(event: Dict[str, Any]) -> int:
    """{"dateFrom": "01-05-2021", "dateTo": "30-05-2021", "weekday": "Sun"} -> 5."""
    date_from = event.get('dateFrom')
    date_to = event.get('dateTo')
    if not date_from or not date_to:
        raise ValueError("dateFrom and dateTo are required")

    return weekday_service.count_weekday(date_from, date_to, event.get('weekday', 'Sun'))


def _obfuscate(event: Dict[str, Any]) -> str:
    """{"input": "+44 123 456 789"} -> "+**-***-**6-789"."""
    raw = event.get('input')
    if not isinstance(raw, str) or not raw:
        raise ValueError("input is required")

    return obfuscation_service.obfuscate(raw)


OPERATIONS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    'ordinal': _ordinal,
    'count_weekday': _count_weekday,
    'obfuscate': _obfuscate,
}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Run one utility operation.

    Args:
        event: Lambda event with "operation" and its arguments
        context: Lambda context

    Returns:
        Dict with statusCode and JSON body:
        200 {"operation", "result"}, 400 {"error", "errorType"} or 500 {"error", "message"}
    """
    operation = event.get('operation', '')
    # Never log the event itself: it can hold raw contact data
    logger.info(f"Environment: {ENVIRONMENT}, operation: {operation}")

    try:
        if not isinstance(operation, str) or operation not in OPERATIONS:
            raise ValueError(
                f"Unknown operation: {operation!r}. "
                f"Expected one of: {', '.join(sorted(OPERATIONS))}"
            )

        result = OPERATIONS[operation](event)

        logger.info(f"Operation {operation} completed")

        return {
            'statusCode': 200,
            'headers': {
                'Content-Type': 'application/json'
            },
            'body': json.dumps({
                'operation': operation,
                'result': result
            })
        }

    except ValueError as ve:
        error_type = type(ve).__name__ if isinstance(ve, FormUtilsError) else 'ValidationError'
        logger.warning(f"Validation error ({error_type}): {str(ve)}")
        return {
            'statusCode': 400,
            'body': json.dumps({
                'error': str(ve),
                'errorType': error_type
            })
        }

    except Exception as e:
        logger.error(f"Error running operation {operation}: {str(e)}", exc_info=True)
        return {
            'statusCode': 500,
            'body': json.dumps({
                'error': 'Internal server error',
                'message': str(e)
            })
        }


def health_check(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    return {
        'statusCode': 200,
        'body': json.dumps({
            'status': 'healthy',
            'environment': ENVIRONMENT,
            'operations': sorted(OPERATIONS)
        })
    }
