"""
CURRICULO - offline résumé parsing for the résumé editor

Turns raw text extracted from a PDF/DOCX/TXT résumé into the canonical
structured document the editor, templates and prompt builders bind to.

Architecture:
- Parsing Context: normalization, section classification, entity extraction
  and document assembly, all rule based and network free
- Utils: logging setup, identifier sources, document text reading
"""

__version__ = "0.1.0"
