"""Shared utilities: database, sessions, permissions, logging."""
