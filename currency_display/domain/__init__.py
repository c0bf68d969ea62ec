"""Domain layer: currency value objects, formatters and exceptions."""
