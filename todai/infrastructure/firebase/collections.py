"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written. Task documents are keyed by task id
and hold: title, description, status, priority (optional integer),
due_date (optional timestamp), created_at, updated_at.
"""

COLLECTION_TASKS = "tasks"
