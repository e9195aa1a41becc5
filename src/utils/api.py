"""
Helpers for API Gateway Lambda proxy events and responses.
"""
import json
from datetime import date
from typing import Any, Dict, Optional

# Accepted year range for request dates
MIN_YEAR = 1900
MAX_YEAR = 2999

class RequestError(Exception):
    """Raised when a request cannot be served; carries the HTTP status."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code

def response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build an API Gateway Lambda proxy response.

    Args:
        status_code: HTTP status code
        body: JSON-serializable response body

    Returns:
        API Gateway Lambda proxy response
    """
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
        "isBase64Encoded": False
    }

def error_response(status_code: int, message: str) -> Dict[str, Any]:
    """Build an error response with the message under "error"."""
    return response(status_code, {"error": message})

def get_user_id(event: Dict[str, Any]) -> str:
    """
    Extract the caller's user ID resolved by the API Gateway authorizer.

    Raises:
        RequestError: With status 401 if the event carries no user ID
    """
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    user_id = authorizer.get("user_id") or (authorizer.get("claims") or {}).get("sub")
    if not user_id:
        raise RequestError("Authentication required", status_code=401)
    return str(user_id)

def get_path_id(event: Dict[str, Any]) -> Optional[str]:
    """Get the "id" path parameter, None when absent."""
    return (event.get("pathParameters") or {}).get("id")

def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Decode the JSON body of an event.

    Raises:
        RequestError: If the body is not a JSON object
    """
    body = event.get("body") or {}
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            raise RequestError("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise RequestError("Request body must be a JSON object")
    return body

def parse_date(value: Any, field: str) -> date:
    """
    Parse an ISO 8601 calendar date (YYYY-MM-DD).

    Raises:
        RequestError: If the value is not a valid date or lies outside
            MIN_YEAR..MAX_YEAR
    """
    try:
        parsed = date.fromisoformat(str(value))
    except ValueError:
        raise RequestError(f"{field} must be a date in YYYY-MM-DD format")
    if not MIN_YEAR <= parsed.year <= MAX_YEAR:
        raise RequestError(f"{field} must be between {MIN_YEAR} and {MAX_YEAR}")
    return parsed
