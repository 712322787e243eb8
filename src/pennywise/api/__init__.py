"""REST API for pennywise."""
