"""Artfolio web server."""
