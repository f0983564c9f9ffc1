"""Output layer — Rich console rendering, JSON formatting, and SVG."""
