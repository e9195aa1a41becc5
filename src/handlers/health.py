"""
Lambda handler for the health check.
"""
import os
from typing import Any, Dict

from aws_lambda_powertools.utilities.typing import LambdaContext

from src.utils.api import response

def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Report that the service is up."""
    return response(200, {
        "status": "OK",
        "service": os.environ.get("SERVICE_NAME", "cyclefem")
    })
