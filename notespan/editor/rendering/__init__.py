"""Rendering support for formatted notes, transport-agnostic.

Contains:
- segmenter: flattens spans into non-overlapping display segments
- renderer: HTML fragment/page and rich console output for segments
- debug_tools: span-to-text mapping for troubleshooting
"""
