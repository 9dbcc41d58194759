"""Structured output models."""
