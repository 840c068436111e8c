"""Grid, character and world containers."""
