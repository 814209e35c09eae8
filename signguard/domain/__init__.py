"""Domain types for rich text trees."""
