"""Shared helpers: configuration, logging and id generation."""
