"""HTTP adapter — input coercion, display formatting, narrative, FastAPI server."""
