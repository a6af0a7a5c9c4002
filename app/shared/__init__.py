# app\shared\__init__.py
"""
Shared utilities package.

This module contains cross-cutting concerns used by both the Core Domain
and Infrastructure Adapters, including:
- Configuration management (pydantic-settings)
- Structured logging (structlog)
- Distributed tracing (OpenTelemetry)
- Dependency Injection wiring
"""
