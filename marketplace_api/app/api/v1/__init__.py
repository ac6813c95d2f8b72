"""Version 1 of the Local Services Marketplace API."""
