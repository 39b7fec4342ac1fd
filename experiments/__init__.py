"""
Experiments Module
==================

This module provides scripts for generating benchmark graph collections.

Scripts
-------
generate_graphs
    Run the generator configurations in ``config/generators.yaml`` and
    save each graph as an SMAT file
"""

__all__ = [
    "generate_graphs",
]
