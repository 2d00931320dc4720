"""Domain entities, their table models and repositories."""
