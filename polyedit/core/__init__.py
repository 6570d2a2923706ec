"""Implementation modules of the polyedit geometry engine.

Import from the top-level ``polyedit`` package; the layout of ``polyedit.core``
may change between releases.
"""
