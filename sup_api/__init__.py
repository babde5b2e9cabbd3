"""sup-api: accounts and directed messages behind Basic authentication."""
