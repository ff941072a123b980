"""Data access for the todo table."""
