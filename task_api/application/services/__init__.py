"""Application services: request validation and task creation."""
