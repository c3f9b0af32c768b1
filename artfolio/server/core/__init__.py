"""Core server configuration, constants and security dependencies."""
