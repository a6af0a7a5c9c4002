# tests\__init__.py
"""
Test Suite for the Candidate Intake Service.

Organization:
- `core`: Use Case and Domain Model tests with mocked / in-memory ports.
- `adapters`: Repository (in-memory SQLite), file storage (tmp_path, mocked S3)
  and HTTP endpoint tests.
"""
