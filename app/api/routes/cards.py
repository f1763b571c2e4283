"""
Card processing routes for local development.
Bridges plain HTTP requests to the serverless handler so the function can be
exercised without a deployment.
"""
from fastapi import APIRouter, Request, Response

from app.presentation.lambda_handler import lambda_handler


router = APIRouter()

BRIDGED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/process-audio", methods=BRIDGED_METHODS, tags=["Cards"])
@router.api_route("/.netlify/functions/process-audio", methods=BRIDGED_METHODS, include_in_schema=False)
async def process_audio(request: Request) -> Response:
    """
    Forward the request to the card processor handler.

    Status, headers and body are returned exactly as the handler built them.
    """
    raw_body = await request.body()
    event = {
        "httpMethod": request.method,
        "path": request.url.path,
        "headers": dict(request.headers),
        "body": raw_body.decode("utf-8", errors="replace") if raw_body else None,
        "isBase64Encoded": False,
    }

    result = lambda_handler(event, None)

    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result.get("headers") or {}
    )
