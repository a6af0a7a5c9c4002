# app\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. They orchestrate
the flow of data between the Domain Entities and the Infrastructure Ports.
Each use case represents a specific business action (e.g., "Add Candidate")
and is responsible for:
1. Enforcing business rules (one candidate per email).
2. Interacting with Ports (Candidate Repository, File Storage).
3. Returning Domain Entities or raising Domain Errors.
"""

from .add_candidate import AddCandidate, CV_DESTINATION

__all__ = [
    "AddCandidate",
    "CV_DESTINATION",
]
