"""Command line interface for notespan."""
