"""
Lambda handler for the user profile.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.utils.api import RequestError, response, get_user_id, parse_body
from src.utils.clients import get_records
from src.utils.logging import logger
from src.utils.middleware import api_errors

tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@api_errors
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Handle profile requests.

    GET returns the profile; PUT changes the name and, when it lies in the
    accepted range, the declared cycle length.
    """
    user_id = get_user_id(event)
    method = event.get("httpMethod")
    records = get_records()

    if method == "GET":
        profile = records.get_profile(user_id)
        return response(200, profile.model_dump(mode="json", by_alias=True))

    if method == "PUT":
        body = parse_body(event)
        cycle_length = body.get("cycleLength")
        if cycle_length is not None and (isinstance(cycle_length, bool) or not isinstance(cycle_length, int)):
            raise RequestError("cycleLength must be an integer")
        name = body.get("name")
        if name is not None and not isinstance(name, str):
            raise RequestError("name must be a string")
        profile = records.update_profile(user_id, name=name, cycle_length=cycle_length)
        return response(200, {
            "message": "Profile updated",
            "user": profile.model_dump(mode="json", by_alias=True)
        })

    raise RequestError(f"Unsupported route {method} {event.get('path')}", status_code=405)
