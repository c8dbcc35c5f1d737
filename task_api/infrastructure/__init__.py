"""Infrastructure layer: SQL persistence implementing application ports."""
