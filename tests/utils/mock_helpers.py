#!/usr/bin/env python3
"""
Shared mock helpers for reducing duplication in test fixtures.
Contains common mock setup patterns and factory functions.
"""
import base64
import json
from unittest.mock import Mock
from typing import Dict, Any, Optional


class MockHelpers:
    """Helper class for creating common mock objects with consistent configurations."""

    @staticmethod
    def create_mock_lambda_context() -> Mock:
        """Create a mock Lambda context with standard attributes."""
        context = Mock()
        context.function_name = 'process-audio'
        context.aws_request_id = 'test-request-id-123'
        context.function_version = '$LATEST'
        context.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:process-audio'
        context.get_remaining_time_in_millis.return_value = 30000
        return context

    @staticmethod
    def create_http_event(
        method: str = 'POST',
        body: Optional[Any] = None,
        base64_encoded: bool = False
    ) -> Dict[str, Any]:
        """
        Create a REST-style HTTP event.

        Dict bodies are serialised to JSON; string bodies are used verbatim.
        """
        if isinstance(body, dict):
            body = json.dumps(body)
        if base64_encoded and body is not None:
            body = base64.b64encode(body.encode('utf-8')).decode('ascii')
        return {
            'httpMethod': method,
            'path': '/.netlify/functions/process-audio',
            'headers': {'content-type': 'application/json'},
            'body': body,
            'isBase64Encoded': base64_encoded
        }

    @staticmethod
    def create_http_api_v2_event(method: str = 'POST', body: Optional[str] = None) -> Dict[str, Any]:
        """Create an API Gateway HTTP API (payload v2) event."""
        return {
            'version': '2.0',
            'rawPath': '/process-audio',
            'requestContext': {'http': {'method': method, 'path': '/process-audio'}},
            'body': body,
            'isBase64Encoded': False
        }

    @staticmethod
    def create_card_body(
        card_name: str = 'Song',
        card_desc: str = 'Some note\nAudio URL: https://host/song.wav\nTags: chill, lofi',
        card_id: str = 'c1'
    ) -> Dict[str, Any]:
        """Create a card request body with standard values."""
        return {'cardName': card_name, 'cardDesc': card_desc, 'cardId': card_id}
