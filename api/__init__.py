"""Password Strength REST API package."""
