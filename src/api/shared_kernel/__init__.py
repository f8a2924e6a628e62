"""Shared Kernel module.

Components shared by the tenancy context and the infrastructure layer.
Currently this is the observation context carried by every domain probe.
"""
