"""Application layer - construction, commands, export and the facade."""
