"""Code kinds, display labels and forecast index bands."""
