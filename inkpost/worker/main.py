"""
Cache worker entry point.

Long-polls the cache invalidation queue and hands each event to the
CacheInvalidationProcessor, one message at a time.

Acknowledgement:
================
    processed              → message deleted
    malformed              → logged, message deleted (it can never succeed)
    processing failed      → logged, message left on the queue; SQS makes it
                             visible again after the visibility timeout

SIGINT/SIGTERM stop the loop after the message in flight; Redis and the
database engine are closed on the way out.

Usage:
======
    python -m inkpost.worker.main
"""

import asyncio
import signal
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from inkpost.config.settings import settings
from inkpost.shared.adapters.redis_adapter import get_redis_adapter
from inkpost.shared.adapters.sqs_adapter import QueueMessage, SQSAdapter, get_sqs_adapter
from inkpost.shared.core.logging import clear_log_context, log_context, logger
from inkpost.shared.db import close_db
from inkpost.worker.processors import (
    BaseProcessor,
    CacheInvalidationProcessor,
    MalformedMessageError,
)


RECEIVE_ERROR_BACKOFF_SECONDS = 5


class CacheWorker:
    """
    SQS poll loop.

    Attributes:
        queue: SQS adapter
        processor: Event processor
        queue_url: Queue to consume
    """

    def __init__(
        self,
        queue: SQSAdapter,
        processor: BaseProcessor,
        queue_url: Optional[str] = None,
    ) -> None:
        self.queue = queue
        self.processor = processor
        self.queue_url = queue_url or settings.SQS_CACHE_INVALIDATION_QUEUE_URL
        self._stopping = asyncio.Event()

    @property
    def stopping(self) -> bool:
        return self._stopping.is_set()

    def stop(self) -> None:
        """Ask the loop to exit after the message in flight."""
        if not self.stopping:
            logger.info("Shutdown requested, finishing current message")
        self._stopping.set()

    async def run(self) -> None:
        """Poll until stop() is called."""
        logger.info("Cache worker started", queue_url=self.queue_url)

        while not self.stopping:
            try:
                await self.poll_once()
            except (ClientError, BotoCoreError) as e:
                logger.error("Queue receive failed", error=str(e))
                await self._sleep(RECEIVE_ERROR_BACKOFF_SECONDS)

        logger.info("Cache worker stopped")

    async def poll_once(self) -> int:
        """
        Receive one batch and handle it.

        Returns:
            Number of messages received
        """
        messages = await asyncio.to_thread(
            self.queue.receive_messages,
            self.queue_url,
            max_messages=settings.WORKER_MAX_MESSAGES,
            wait_time_seconds=settings.WORKER_WAIT_TIME_SECONDS,
            visibility_timeout=settings.WORKER_VISIBILITY_TIMEOUT,
        )

        for message in messages:
            if self.stopping:
                # Unhandled messages become visible again after the timeout
                break
            await self.handle_message(message)

        return len(messages)

    async def handle_message(self, message: QueueMessage) -> bool:
        """
        Process one message and acknowledge it when appropriate.

        Returns:
            True if the event was applied
        """
        log_context(message_id=message.message_id)
        try:
            try:
                await self.processor.process(message.body)
            except MalformedMessageError as e:
                logger.error("Discarding malformed message", error=str(e), body=message.body)
                await self._acknowledge(message)
                return False
            except Exception as e:
                logger.error(
                    "Event processing failed, leaving message for redelivery",
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True,
                )
                return False

            await self._acknowledge(message)
            logger.info("Event processed")
            return True
        finally:
            clear_log_context()

    async def _acknowledge(self, message: QueueMessage) -> None:
        try:
            await asyncio.to_thread(
                self.queue.delete_message,
                self.queue_url,
                message.receipt_handle,
            )
        except (ClientError, BotoCoreError) as e:
            logger.warning("Message delete failed, it will be redelivered", error=str(e))

    async def _sleep(self, seconds: float) -> None:
        """Sleep, waking early on shutdown."""
        try:
            await asyncio.wait_for(self._stopping.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            pass


async def main() -> None:
    """Run the worker until SIGINT/SIGTERM."""
    if not settings.SQS_CACHE_INVALIDATION_QUEUE_URL:
        logger.error("SQS_CACHE_INVALIDATION_QUEUE_URL is not set")
        return

    redis_adapter = get_redis_adapter()
    worker = CacheWorker(
        queue=get_sqs_adapter(),
        processor=CacheInvalidationProcessor(redis_adapter),
    )

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, worker.stop)

    try:
        await worker.run()
    finally:
        await redis_adapter.close()
        await close_db()
        logger.info("Cache worker shutdown complete")


if __name__ == "__main__":
    asyncio.run(main())
