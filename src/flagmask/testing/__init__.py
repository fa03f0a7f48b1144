"""Testing helpers for code that embeds flagmask types."""
