"""Catalog synchronisation domain: matching, reconciliation and reporting."""
