"""Domain layer: errors and ports shared by every pattern example."""
