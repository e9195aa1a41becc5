"""
Lambda handler for cycle statistics.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.utils.api import RequestError, response, get_user_id
from src.utils.clients import get_records
from src.utils.logging import logger
from src.utils.middleware import api_errors

tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@api_errors
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Handle statistics request.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    user_id = get_user_id(event)
    if event.get("httpMethod") != "GET":
        raise RequestError(f"Unsupported route {event.get('httpMethod')} {event.get('path')}", status_code=405)

    stats = get_records().get_statistics(user_id)
    return response(200, stats.model_dump(mode="json", by_alias=True))
