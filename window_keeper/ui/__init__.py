"""Qt widget integration."""
