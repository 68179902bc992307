"""Webhook decision pipeline."""
