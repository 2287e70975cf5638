"""Security middleware shared by every router."""
