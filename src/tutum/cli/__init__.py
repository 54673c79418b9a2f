"""Command line interface for Tutum SDK."""
