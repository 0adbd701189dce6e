"""Text interface for displaying game state."""
