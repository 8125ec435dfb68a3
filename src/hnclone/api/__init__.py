"""HTTP surface: JSON API and HTML views."""
