"""Domain layer: models, profile helpers and the scoring engine."""
