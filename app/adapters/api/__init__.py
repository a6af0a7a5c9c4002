# app\adapters\api\__init__.py
"""
REST API Adapter.

This package acts as the HTTP entry point for candidate intake.
It is built on FastAPI and follows the Hexagonal Architecture principles:
- It depends on `app.core` (Use Cases & Models).
- It resolves use cases through `app.shared.container`.
- It does NOT contain business logic.

The application factory lives in `app.main`.
"""
