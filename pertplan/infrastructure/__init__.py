"""Infrastructure layer: file persistence."""
