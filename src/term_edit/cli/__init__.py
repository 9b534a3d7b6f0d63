"""Command-line interface and full-screen editor front end."""
