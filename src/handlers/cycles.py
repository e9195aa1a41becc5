"""
Lambda handler for cycle records and the predictions derived from them.

Routes:
    GET    /cycles       list cycles with current predictions
    POST   /cycles       log a new cycle
    PUT    /cycles/{id}  update a cycle
    DELETE /cycles/{id}  remove a cycle
"""
from typing import Any, Dict, List, Optional

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.cycle import CycleRecord, Flow
from src.models.prediction import Predictions
from src.services.records import UNSET
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

def serialize_cycle(cycle: CycleRecord) -> Dict[str, Any]:
    """Convert a cycle to its JSON representation."""
    return cycle.model_dump(mode="json", by_alias=True)

def serialize_predictions(predictions: Optional[Predictions]) -> Optional[Dict[str, Any]]:
    """Convert predictions to their JSON representation, keeping None."""
    if predictions is None:
        return None
    return predictions.model_dump(mode="json", by_alias=True)

def parse_flow(value: Any) -> Optional[Flow]:
    """Parse an optional flow intensity."""
    if value is None:
        return None
    try:
        return Flow(value)
    except ValueError:
        raise RequestError(f"flow must be one of: {', '.join(f.value for f in Flow)}")

def parse_symptoms(value: Any) -> Optional[List[str]]:
    """Parse an optional list of symptom tags."""
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
        raise RequestError("symptoms must be a list of strings")
    return value

def list_cycles(user_id: str) -> Dict[str, Any]:
    cycles, predictions = get_records().list_cycles(user_id)
    return response(200, {
        "cycles": [serialize_cycle(cycle) for cycle in cycles],
        "predictions": serialize_predictions(predictions)
    })

def create_cycle(user_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    if not body.get("startDate"):
        raise RequestError("startDate is required")

    end_date = body.get("endDate")
    cycle, predictions = get_records().add_cycle(
        user_id,
        start_date=parse_date(body["startDate"], "startDate"),
        end_date=parse_date(end_date, "endDate") if end_date else None,
        flow=parse_flow(body.get("flow")),
        symptoms=parse_symptoms(body.get("symptoms"))
    )
    return response(201, {
        "message": "Cycle recorded",
        "cycle": serialize_cycle(cycle),
        "predictions": serialize_predictions(predictions)
    })

def update_cycle(user_id: str, cycle_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    end_date = UNSET
    if "endDate" in body:
        end_date = parse_date(body["endDate"], "endDate") if body["endDate"] else None

    start_date = body.get("startDate")
    cycle, predictions = get_records().update_cycle(
        user_id,
        cycle_id,
        start_date=parse_date(start_date, "startDate") if start_date else None,
        end_date=end_date,
        flow=parse_flow(body.get("flow")),
        symptoms=parse_symptoms(body.get("symptoms"))
    )
    return response(200, {
        "message": "Cycle updated",
        "cycle": serialize_cycle(cycle),
        "predictions": serialize_predictions(predictions)
    })

def delete_cycle(user_id: str, cycle_id: str) -> Dict[str, Any]:
    predictions = get_records().remove_cycle(user_id, cycle_id)
    return response(200, {
        "message": "Cycle deleted",
        "predictions": serialize_predictions(predictions)
    })

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@api_errors
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Handle cycle requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    user_id = get_user_id(event)
    method = event.get("httpMethod")
    cycle_id = get_path_id(event)

    if method == "GET" and not cycle_id:
        return list_cycles(user_id)
    if method == "POST" and not cycle_id:
        return create_cycle(user_id, parse_body(event))
    if method == "PUT" and cycle_id:
        return update_cycle(user_id, cycle_id, parse_body(event))
    if method == "DELETE" and cycle_id:
        return delete_cycle(user_id, cycle_id)

    raise RequestError(f"Unsupported route {method} {event.get('path')}", status_code=405)
