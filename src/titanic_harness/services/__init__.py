"""HTTP clients for the backend under test."""
