"""Infrastructure: Firestore persistence and storage exceptions."""
