"""Storefront API: users, roles, products and orders."""

__version__ = "0.1.0"
