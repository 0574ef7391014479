"""
Adapters Package

External service integrations.

Contents:
=========
- redis_adapter: Redis blog read cache
- sqs_adapter: AWS SQS queue client (cache invalidation events)
- storage_adapter: S3 image storage
- google_oauth_adapter: Google sign-in code exchange
- user_service_client: HTTP lookups against the user service

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from inkpost.shared.adapters.redis_adapter import get_redis_adapter
    from inkpost.shared.adapters.sqs_adapter import get_sqs_adapter
"""
