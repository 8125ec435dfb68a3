"""HTMX-powered HTML views."""
