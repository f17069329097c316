"""Infrastructure layer - logging, output adapters and the variant registry."""
