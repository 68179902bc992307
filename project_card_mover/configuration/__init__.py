"""Configuration loading and command line entry point."""
