"""Goods-receipt (primka) spreadsheet to PDF conversion."""

__version__ = "1.0.0"
