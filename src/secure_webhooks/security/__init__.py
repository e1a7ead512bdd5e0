"""Security – webhook signing schemes."""
