"""Version 1 of the Gift List API."""
