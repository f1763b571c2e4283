"""
Lambda presentation layer handler for card processing.

Handles HTTP events for the card processor: CORS pre-flight, method
filtering, delegation to the card orchestrator and response formatting.
"""
import json
from typing import Dict, Any, Optional

from app.application.card_orchestrator import CardOrchestrator, processing_failure
from app.config.settings import settings
from app.core.models.card import (
    CardProcessingFailure,
    CardProcessingResult,
    ProcessingErrorType,
)
from app.infrastructure.logging.log_config import get_logger
from app.utils.event_parser import HttpEventParser

logger = get_logger(__name__)

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


def _request_id(context: Any) -> Optional[str]:
    return getattr(context, 'aws_request_id', None)


def cors_preflight_headers() -> Dict[str, str]:
    """Headers returned for a CORS pre-flight request."""
    return {
        'Access-Control-Allow-Origin': settings.cors_allow_origin,
        'Access-Control-Allow-Headers': 'Content-Type',
        'Access-Control-Allow-Methods': 'POST, OPTIONS'
    }


def json_headers() -> Dict[str, str]:
    """Headers returned with every JSON response."""
    return {
        'Access-Control-Allow-Origin': settings.cors_allow_origin,
        'Content-Type': 'application/json'
    }


def build_response(result: CardProcessingResult) -> Dict[str, Any]:
    """
    Convert a processing result to a Lambda HTTP response.

    Args:
        result: Success or failure outcome of card processing

    Returns:
        Dict with statusCode, headers and a JSON string body
    """
    if isinstance(result, CardProcessingFailure):
        body = result.to_dict()
    else:
        body = result.payload

    return {
        'statusCode': result.status_code,
        'headers': json_headers(),
        'body': json.dumps(body)
    }


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda entry point for card processing requests.

    Args:
        event: HTTP event (httpMethod, body, isBase64Encoded)
        context: Lambda context, may be None for local invocations

    Returns:
        Dict with statusCode, headers and body
    """
    parser = HttpEventParser()
    method = parser.parse_method(event)

    logger.info("Card processor invoked", extra={
        "extra_fields": {
            "request_id": _request_id(context),
            "method": method
        }
    })

    if method == 'OPTIONS':
        return {
            'statusCode': 200,
            'headers': cors_preflight_headers(),
            'body': ''
        }

    if method != 'POST':
        logger.warning("Rejected request method", extra={
            "extra_fields": {
                "request_id": _request_id(context),
                "method": method
            }
        })
        return build_response(CardProcessingFailure(
            error_type=ProcessingErrorType.METHOD_NOT_ALLOWED,
            message=METHOD_NOT_ALLOWED_MESSAGE,
            status_code=405
        ))

    try:
        body = parser.parse_body(event)
        result = CardOrchestrator().process_body(body)
    except Exception as e:
        logger.error("Processing error", extra={
            "extra_fields": {
                "request_id": _request_id(context),
                "error": str(e),
                "error_type": type(e).__name__
            }
        })
        result = processing_failure(e)

    response = build_response(result)

    logger.info("Card processor completed", extra={
        "extra_fields": {
            "request_id": _request_id(context),
            "status_code": response['statusCode']
        }
    })

    return response


def health_check_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Health check endpoint for the card processor.

    Args:
        event: Lambda event
        context: Lambda context

    Returns:
        Health status response
    """
    try:
        health_status = {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
            "request_id": _request_id(context)
        }

        return {
            "statusCode": 200,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(health_status)
        }

    except Exception as e:
        logger.error("Health check failed", extra={"extra_fields": {"error": str(e)}})

        return {
            "statusCode": 500,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({
                "status": "unhealthy",
                "error": str(e)
            })
        }
