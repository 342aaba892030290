"""linewise API package."""
