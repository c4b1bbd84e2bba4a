"""Domain models, enums and markup constants."""
