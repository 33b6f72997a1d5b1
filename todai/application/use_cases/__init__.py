"""Use cases: orchestration of validation and repositories."""
