"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

Keeping one function keeps the verifier and DB pool warm across routes.
"""

from typing import Callable, Tuple

from . import health_check, verify_ticket
from utils.error_handling import json_response


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    The event contains the HTTP method and path; we route it to the correct
    handler while keeping shared setup (logging, error handling) centralized.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path}"

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
        ("OPTIONS /tickets/verify", verify_ticket.preflight_handler),
        ("POST /tickets/verify", verify_ticket.lambda_handler),
    )

    for prefix, handler in route_table:
        if route_key.startswith(prefix):
            return handler(event, context)

    return json_response(404, {"message": "Route not found", "route": route_key})
