"""Schemas: Pydantic response models for the listing API."""
