"""Format readers: raw text to a normalized catalog tree."""
