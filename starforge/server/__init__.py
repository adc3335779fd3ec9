"""HTTP surface over the galaxy commands."""
