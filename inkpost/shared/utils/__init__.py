"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: JWT management

Usage:
======
    from inkpost.shared.utils.security import SecurityUtils
"""

from inkpost.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
