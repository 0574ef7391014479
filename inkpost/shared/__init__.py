"""
Shared Module

Contains code shared between the three API services and the worker:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models and queue events
- Core: Logging, exceptions
- Adapters: External service integrations (Redis, SQS, S3, Google, user service)

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← External services
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Utilities

Usage:
======
    from inkpost.shared.models import User, Blog
    from inkpost.shared.repositories import BlogRepository
    from inkpost.shared.services import BlogService
    from inkpost.shared.core import logger, InkpostException
"""
