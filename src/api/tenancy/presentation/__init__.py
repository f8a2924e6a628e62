"""Presentation layer for Tenancy bounded context."""

from tenancy.presentation.routes import router

__all__ = ["router"]
