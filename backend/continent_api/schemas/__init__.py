"""Pydantic Schemas — response models for API endpoints.

Invariants:
    - Schemas shape data at the system boundary (API responses)
    - Domain records from core/ are converted, never exposed directly

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain values
"""
