"""Infrastructure layer: registry, providers and wiring."""
