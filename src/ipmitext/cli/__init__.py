"""Command-line interface for ipmitext."""
