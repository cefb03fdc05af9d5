"""
Database models for the link shortener.

Links and their click events live in the same relational store; the
`total_clicks` column on Link is a denormalized copy of the click count.
"""

from .link import Link
from .click import Click

__all__ = ["Link", "Click"]
