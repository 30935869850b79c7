"""Host core used by the scanner tests."""
