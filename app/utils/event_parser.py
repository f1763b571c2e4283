"""
HTTP event parsing for the card processor function.

Normalises the request events delivered by serverless HTTP front ends
(API Gateway REST / Netlify payloads, API Gateway HTTP API v2 payloads and
the local FastAPI bridge) into a method and a decoded body.
"""
import base64
import binascii
from typing import Dict, Any, Optional


class HttpEventParser:
    """
    Parser for HTTP events that invoke the function.

    The method is read eagerly; the body is only decoded on request so
    that pre-flight and rejected methods never touch it.
    """

    def parse_method(self, event: Optional[Dict[str, Any]]) -> str:
        """
        Extract the request method.

        Matching is case-insensitive: "post" and "POST" are the same
        method, whereas a strict comparison would reject the former.

        Args:
            event: Lambda event payload

        Returns:
            Upper-cased method name, empty string if the event carries none
        """
        event = event or {}
        method = event.get('httpMethod')
        if not method:
            http_context = (event.get('requestContext') or {}).get('http') or {}
            method = http_context.get('method')
        return str(method).upper() if method else ''

    def parse_body(self, event: Optional[Dict[str, Any]]) -> Optional[str]:
        """
        Extract the request body as text.

        Args:
            event: Lambda event payload

        Returns:
            Body text, or None when the event has no body

        Raises:
            ValueError: If a base64 flagged body cannot be decoded
        """
        event = event or {}
        body = event.get('body')

        if body is None or not event.get('isBase64Encoded'):
            return body

        try:
            return base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError(f"Invalid base64 request body: {str(e)}")
