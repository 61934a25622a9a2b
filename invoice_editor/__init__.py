"""
Invoice Editor - Source Package

Core of a single-document editor for hourly-consulting invoices:
the document model, JSON persistence and .docx template export.

DESIGN PRINCIPLES:
1. Totals are always derived, never stored
2. Fail early, fail visibly
3. Nothing is written until the full payload is built
4. Every editor operation is auditable
5. The presentation layer is an external collaborator
"""

__version__ = "1.0.0"
__author__ = "Invoice Editor Team"
