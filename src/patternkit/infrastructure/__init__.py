"""Infrastructure layer - logging and shared singleton machinery."""
