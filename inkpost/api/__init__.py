"""
API Module

FastAPI applications and route handlers of the three services.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry points (user_app, author_app, blog_app)
    ├── routes.py         ← Route registration per service
    ├── dependencies/     ← FastAPI dependencies
    ├── handlers/         ← Route handlers
    └── middleware/       ← Custom middleware

Usage:
======
    uvicorn inkpost.api.main:blog_app --reload
"""
