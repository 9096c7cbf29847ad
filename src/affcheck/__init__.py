"""affcheck - semantic checks for parsed AFF rhythm-game charts."""
