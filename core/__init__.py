"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- Instrumentation (tracing, metrics)
- Middleware components
- Health check views
"""
