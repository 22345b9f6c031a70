"""Core building blocks: API client, lifecycle, signals."""
