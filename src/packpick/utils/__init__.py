"""Shared helpers for packpick."""
