"""Domain layer: entities, ports and their backends."""
