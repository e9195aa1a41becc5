"""
Middleware functions for request processing.
"""
from functools import wraps
from typing import Any, Callable, Dict

from pydantic import ValidationError

from src.services.exceptions import RecordNotFoundError
from src.utils.api import RequestError, error_response
from src.utils.logging import logger

def api_errors(f: Callable) -> Callable:
    """
    Decorator translating exceptions raised by handlers into API responses.

    RequestError keeps its own status, validation failures become 400,
    missing records 404 and anything else 500.

    Args:
        f: Handler function to wrap

    Returns:
        Wrapped handler function
    """
    @wraps(f)
    def wrapped(event: Dict[str, Any], *args: Any, **kwargs: Any) -> Dict[str, Any]:
        try:
            return f(event, *args, **kwargs)
        except RequestError as e:
            logger.info("Rejected request", extra={
                "status_code": e.status_code,
                "error": str(e),
                "http_method": event.get("httpMethod")
            })
            return error_response(e.status_code, str(e))
        except ValidationError as e:
            logger.info("Invalid record data", extra={
                "errors": e.errors(include_url=False, include_context=False, include_input=False)
            })
            return error_response(400, "Invalid record data")
        except RecordNotFoundError as e:
            return error_response(404, str(e))
        except Exception as e:
            logger.exception("Unhandled error processing request", extra={
                "error": str(e),
                "error_type": e.__class__.__name__,
                "http_method": event.get("httpMethod"),
                "path": event.get("path")
            })
            return error_response(500, "Internal server error")

    return wrapped
