"""
Inkpost Backend

Multi-service blog platform: user/auth, authoring, and a cached read path.

Package Structure:
==================
    inkpost/
    ├── api/        ← FastAPI applications (user, author, blog services)
    ├── worker/     ← Cache invalidation consumer
    ├── shared/     ← Shared code (models, repositories, services, adapters)
    └── config/     ← Configuration

Running the Services:
=====================
    uvicorn inkpost.api.main:user_app --port 5000
    uvicorn inkpost.api.main:author_app --port 5001
    uvicorn inkpost.api.main:blog_app --port 5002

    # Cache invalidation worker
    python -m inkpost.worker.main
"""

__version__ = "1.0.0"
