"""Shared test doubles and fixtures."""
