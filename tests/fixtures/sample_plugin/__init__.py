"""Plugin used by the scanner tests."""
