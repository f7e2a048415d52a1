"""Utility functions"""

from .loader import load_document, load_document_file

__all__ = ["load_document", "load_document_file"]
