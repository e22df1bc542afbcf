# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: logging, progress display, rich tables

"""
Utils Layer: Shared infrastructure and cross-cutting concerns

This layer provides:
- Logging configuration and progress tracking
- Rich table helpers for the command line

Data Flow: Supporting services for all other layers
"""

from . import logging

__all__ = [
    "logging",
]
