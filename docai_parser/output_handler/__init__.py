"""
Output Handler Module for the Document AI Parser.

This module provides:
    - Excel workbook generation (documents and line items)
    - JSON summary files
"""

from .handler import OutputHandler
from .excel_exporter import ExcelExporter
from .json_exporter import JsonExporter

__all__ = ['OutputHandler', 'ExcelExporter', 'JsonExporter']
