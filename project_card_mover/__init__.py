"""Closes GitHub issues whose project board card reaches the "Done" status."""
