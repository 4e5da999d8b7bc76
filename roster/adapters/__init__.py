"""Adapters layer for the Roster service.

This layer contains all adapters that translate between the core domain
and external systems (database, HTTP, gRPC, logging).
"""
