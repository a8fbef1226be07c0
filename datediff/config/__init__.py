"""Configuration for interval display and logging."""
