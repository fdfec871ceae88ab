"""
PRESS - Profile-driven Resume Export & Styling Service

Merges a stored profile (identity, contacts, work and education history) with
per-request resume content supplied as JSON text, renders the result through a
named HTML layout, and rasterizes it to PDF with headless Chromium.

Architecture:
- Profiles Context: Loading and caching stored profile records
- Templating Context: Content normalization, document merging, layout registry
- Rendering Context: Markup generation and PDF rasterization
- Delivery Context: Filename derivation, orchestration, HTTP API
"""

__version__ = "0.1.0"
