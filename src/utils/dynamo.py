"""
DynamoDB utility functions for data access.
"""
import os
from typing import Dict, List, Optional, Any
import boto3
from boto3.dynamodb.conditions import Key

# Singleton instance
_dynamo_instance = None

# Sort key of the single profile item stored per user
PROFILE_SK = "PROFILE"

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.

    Example:
        dynamo = get_dynamo()
        item = dynamo.get_item({"PK": create_pk("123"), "SK": PROFILE_SK})

    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client

    Raises:
        EnvironmentError: If TRACKER_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['TRACKER_TABLE_NAME']
        except KeyError:
            raise EnvironmentError(
                "TRACKER_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""

    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table.

        Args:
            item: Dictionary containing item attributes

        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=item)

    def get_item(self, key: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Item if found, None otherwise
        """
        response = self.table.get_item(Key=key)
        return response.get('Item')

    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_prefix: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Query items using partition key and optional sort key prefix.

        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_prefix: Optional prefix the SK attribute must begin with

        Returns:
            List of matching items, following pagination
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_prefix:
            key_condition = key_condition & Key("SK").begins_with(sort_key_prefix)

        response = self.table.query(KeyConditionExpression=key_condition)
        items = response.get('Items', [])
        while 'LastEvaluatedKey' in response:
            response = self.table.query(
                KeyConditionExpression=key_condition,
                ExclusiveStartKey=response['LastEvaluatedKey']
            )
            items.extend(response.get('Items', []))
        return items

    def delete_item(self, key: Dict[str, str]) -> Dict[str, Any]:
        """
        Delete an item from the table.

        Args:
            key: Dictionary containing partition key and sort key

        Returns:
            Response from DynamoDB
        """
        return self.table.delete_item(Key=key)

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_cycle_sk(cycle_id: str) -> str:
    """Create sort key for cycle records."""
    return f"CYCLE#{cycle_id}"

def create_activity_sk(activity_id: str) -> str:
    """Create sort key for activity records."""
    return f"ACTIVITY#{activity_id}"
