"""Tenancy bounded context.

Resolves which tenant a session belongs to from the hostname it is served
on, and the signed-in user's role within that tenant.
"""
