"""Window state and platform logic."""
