"""GitHub GraphQL and REST access."""
