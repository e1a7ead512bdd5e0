"""Kernel – error hierarchy and timing-safe primitives."""
