"""
Core package for the place analysis report application.

Submodules provide the document types, JSON loading, quarterly trend
transforms and user interface rendering helpers that are orchestrated by the
top-level `app.py`.
"""
