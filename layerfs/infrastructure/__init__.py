"""Infrastructure layer for layerfs."""
