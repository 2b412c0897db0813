"""Utilities shared across depthflow."""
