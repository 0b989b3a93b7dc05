"""HTTP API for the intent router."""
