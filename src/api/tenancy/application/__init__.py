"""Application layer for Tenancy bounded context."""
