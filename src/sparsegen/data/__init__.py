"""
Data Module
===========

This module provides reading and writing of networks stored in the SMAT
matrix text format, used to load seed graphs for the generators and to
save generated graphs.
"""

from .smat import (
    read_smat,
    load_matrix_network,
    write_smat,
)

__all__ = [
    "read_smat",
    "load_matrix_network",
    "write_smat",
]
