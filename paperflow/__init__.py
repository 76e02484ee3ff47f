"""
paperflow: reading-order reconstruction for paginated academic documents.

Turns positioned glyph runs into paragraphs, column-aware page text,
leveled sections with page ranges, and math-preserving markdown.
"""

__version__ = "0.1.0"
