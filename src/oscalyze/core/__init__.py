"""Analysis core: counting, extraction, classification."""
