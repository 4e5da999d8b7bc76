"""Roster service: players exposed over HTTP/JSON and gRPC."""

__version__ = "0.1.0"
