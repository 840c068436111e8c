"""Interactive command line helpers."""
