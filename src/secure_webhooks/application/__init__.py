"""Application layer – webhook signing use cases."""
