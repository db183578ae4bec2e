"""Folio - async REST API for a designer's portfolio CMS."""
