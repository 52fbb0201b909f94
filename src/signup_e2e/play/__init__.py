"""Playwright page objects and tests for the signup workflow."""
