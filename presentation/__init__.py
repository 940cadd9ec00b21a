"""Presentation layer - HTTP surface and command line."""
