"""
querylab: SQLAlchemy query-builder walkthrough over a Member/Team schema.
"""

__version__ = "0.1.0"
