"""Flask JSON API for recitation practice."""
