"""
Lambda handler for activity records.

Routes:
    GET    /activities       list activities, newest first
    POST   /activities       log an activity and classify its pregnancy risk
    DELETE /activities/{id}  remove an activity
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.activity import ActivityRecord
from src.utils.api import (
    RequestError,
    response,
    get_user_id,
    get_path_id,
    parse_body,
    parse_date
)
from src.utils.clients import get_records
from src.utils.logging import logger
from src.utils.middleware import api_errors

tracer = Tracer()

def serialize_activity(activity: ActivityRecord) -> Dict[str, Any]:
    """Convert an activity to its JSON representation."""
    return activity.model_dump(mode="json", by_alias=True)

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@api_errors
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Handle activity requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    user_id = get_user_id(event)
    method = event.get("httpMethod")
    activity_id = get_path_id(event)
    records = get_records()

    if method == "GET" and not activity_id:
        activities = records.list_activities(user_id)
        return response(200, {
            "activities": [serialize_activity(activity) for activity in activities]
        })

    if method == "POST" and not activity_id:
        body = parse_body(event)
        if not body.get("date"):
            raise RequestError("date is required")
        protection = body.get("protection", False)
        if not isinstance(protection, bool):
            raise RequestError("protection must be a boolean")
        activity = records.add_activity(
            user_id,
            parse_date(body["date"], "date"),
            protection=protection
        )
        return response(201, {
            "message": "Activity recorded",
            "activity": serialize_activity(activity)
        })

    if method == "DELETE" and activity_id:
        records.remove_activity(user_id, activity_id)
        return response(200, {"message": "Activity deleted"})

    raise RequestError(f"Unsupported route {method} {event.get('path')}", status_code=405)
