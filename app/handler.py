"""
Lambda handler for processing board cards into audio entries.

This module serves as the entry point for the serverless function that
extracts and validates audio links from card descriptions.

Event Flow:
1. Board client sends POST with the card as JSON (after a CORS pre-flight)
2. Handler filters the HTTP method and parses the body
3. Delegates to presentation layer for processing
"""

# Delegate to the presentation layer handler
from app.presentation.lambda_handler import lambda_handler, health_check_handler

__all__ = ["lambda_handler", "health_check_handler"]
