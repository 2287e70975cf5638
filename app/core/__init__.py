"""Configuration and database engine construction."""
