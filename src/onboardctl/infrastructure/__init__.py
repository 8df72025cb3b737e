"""Infrastructure layer — HTTP clients and the per-session object graph."""
