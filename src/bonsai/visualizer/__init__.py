"""
Tree visualizer module.

Generates standalone HTML pages for grown bonsai trees.
"""

from bonsai.visualizer.generator import generate_html, generate_visualization, open_visualization

__all__ = ["generate_html", "generate_visualization", "open_visualization"]
