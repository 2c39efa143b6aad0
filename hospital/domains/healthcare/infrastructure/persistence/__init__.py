"""Healthcare persistence."""
