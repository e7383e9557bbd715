"""Domain layer - diagram elements and their collaborators."""
