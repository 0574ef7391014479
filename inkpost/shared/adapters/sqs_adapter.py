"""
SQS adapter - AWS SQS queue operations.

Provides:
- Message sending to queues
- Message receiving and deletion
- Cache invalidation event serialization

Delivery is at-least-once: a received message stays invisible for the
visibility timeout and comes back unless it is deleted. The worker deletes
only after the event has been applied, which is the whole retry story.
"""

import json
import logging
from typing import Optional, Dict, Any, List
from dataclasses import dataclass

import boto3
from botocore.exceptions import ClientError

from inkpost.config.settings import settings
from inkpost.shared.schemas.events import CacheInvalidationEvent

logger = logging.getLogger(__name__)


@dataclass
class QueueMessage:
    """Received SQS message."""

    message_id: str
    receipt_handle: str
    body: Dict[str, Any]
    attributes: Dict[str, str]


class SQSAdapter:
    """
    Adapter for AWS SQS operations.

    Handles:
    - Publishing cache invalidation events (author service)
    - Receiving and deleting them (cache worker)
    """

    def __init__(
        self,
        region: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        client=None,
    ):
        """
        Initialize SQS adapter.

        Args:
            region: AWS region
            aws_access_key_id: AWS access key
            aws_secret_access_key: AWS secret key
            client: Pre-built boto3 SQS client (tests, custom endpoints)
        """
        self.region = region or settings.AWS_REGION
        self.aws_access_key_id = aws_access_key_id or settings.AWS_ACCESS_KEY_ID
        self.aws_secret_access_key = aws_secret_access_key or settings.AWS_SECRET_ACCESS_KEY
        self._client = client

    @property
    def client(self):
        """Lazy-loaded SQS client."""
        if self._client is None:
            if self.aws_access_key_id and self.aws_secret_access_key:
                self._client = boto3.client(
                    "sqs",
                    region_name=self.region,
                    aws_access_key_id=self.aws_access_key_id,
                    aws_secret_access_key=self.aws_secret_access_key,
                )
            else:
                # Use default credentials (IAM role, environment, etc.)
                self._client = boto3.client("sqs", region_name=self.region)
        return self._client

    def send_message(
        self,
        queue_url: str,
        message_body: Dict[str, Any],
        delay_seconds: int = 0,
    ) -> str:
        """
        Send a message to an SQS queue.

        Args:
            queue_url: URL of the queue
            message_body: Message payload (will be JSON serialized)
            delay_seconds: Delay before message becomes available

        Returns:
            Message ID
        """
        try:
            response = self.client.send_message(
                QueueUrl=queue_url,
                MessageBody=json.dumps(message_body),
                DelaySeconds=delay_seconds,
            )
            message_id = response["MessageId"]

            logger.info("Sent message %s to %s", message_id, queue_url)
            return message_id

        except ClientError as e:
            logger.error("Failed to send message to %s: %s", queue_url, e)
            raise

    def send_cache_invalidation(self, keys: List[str]) -> str:
        """
        Publish a cache invalidation event.

        Args:
            keys: Redis key patterns to evict, e.g. ["blogs:*", "blog:42"]

        Returns:
            Message ID
        """
        event = CacheInvalidationEvent(keys=keys)
        return self.send_message(
            queue_url=settings.SQS_CACHE_INVALIDATION_QUEUE_URL,
            message_body=event.model_dump(mode="json"),
        )

    def receive_messages(
        self,
        queue_url: str,
        max_messages: int = 10,
        wait_time_seconds: int = 20,
        visibility_timeout: int = 60,
    ) -> List[QueueMessage]:
        """
        Receive messages from an SQS queue.

        Bodies that are not valid JSON are surfaced as {"raw": body} so the
        caller can reject them instead of crashing the poll loop.

        Args:
            queue_url: URL of the queue
            max_messages: Maximum messages to receive (1-10)
            wait_time_seconds: Long polling wait time
            visibility_timeout: Time message is hidden from other consumers

        Returns:
            List of QueueMessage objects
        """
        try:
            response = self.client.receive_message(
                QueueUrl=queue_url,
                MaxNumberOfMessages=max(1, min(max_messages, 10)),
                WaitTimeSeconds=wait_time_seconds,
                VisibilityTimeout=visibility_timeout,
                MessageAttributeNames=["All"],
                AttributeNames=["All"],
            )

            messages = []
            for msg in response.get("Messages", []):
                try:
                    body = json.loads(msg["Body"])
                except json.JSONDecodeError:
                    body = {"raw": msg["Body"]}

                messages.append(
                    QueueMessage(
                        message_id=msg["MessageId"],
                        receipt_handle=msg["ReceiptHandle"],
                        body=body if isinstance(body, dict) else {"raw": body},
                        attributes=msg.get("Attributes", {}),
                    )
                )

            return messages

        except ClientError as e:
            logger.error("Failed to receive messages from %s: %s", queue_url, e)
            raise

    def delete_message(
        self,
        queue_url: str,
        receipt_handle: str,
    ) -> None:
        """
        Delete (acknowledge) a message.

        Call this after successfully processing a message.
        """
        try:
            self.client.delete_message(
                QueueUrl=queue_url,
                ReceiptHandle=receipt_handle,
            )
            logger.debug("Deleted message from %s", queue_url)

        except ClientError as e:
            logger.error("Failed to delete message: %s", e)
            raise


# Singleton instance
_sqs_adapter: Optional[SQSAdapter] = None


def get_sqs_adapter() -> SQSAdapter:
    """Get or create SQS adapter singleton."""
    global _sqs_adapter
    if _sqs_adapter is None:
        _sqs_adapter = SQSAdapter()
    return _sqs_adapter
