"""
Cache Invalidation Worker

Consumes cache invalidation events from SQS and applies them to the blog
service's Redis cache.

Package Structure:
==================
    worker/
    ├── main.py           ← Poll loop and process entry point
    └── processors/       ← Event handlers

Usage:
======
    python -m inkpost.worker.main
"""
