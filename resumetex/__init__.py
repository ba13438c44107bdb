"""
resumetex - free-text resume fields to typeset LaTeX documents

Turns loosely formatted, human-typed resume sections into a complete LaTeX
document and hands it to a remote compilation service, falling back to the
raw source when the service cannot produce a PDF.

Architecture:
- Intake Context: Heuristic parsing of free-text resume sections into records
- Templating Context: LaTeX escaping and document assembly
- Rendering Context: Remote PDF compilation and artifact fallback
"""

__version__ = "0.1.0"
