"""Command line interface for pgdist."""
