"""
SMAT Matrix File Module
=======================

This module reads and writes the SMAT text format used to store seed
graphs and generated networks.

Format:
    rows cols nonzeros
    row col value        (repeated nonzeros times, 1-indexed)

Blank lines and lines starting with ``#`` or ``%`` are ignored.
Repeated (row, col) entries are summed when the matrix is assembled.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np
import scipy.sparse

from ..errors import ArgumentError, SMATFormatError
from ..network import MatrixNetwork

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _data_lines(path: Path):
    """Yield ``(lineno, fields)`` for every non-comment line."""
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()

            # Skip comments and empty lines
            if not line or line.startswith("#") or line.startswith("%"):
                continue
            yield lineno, line.split()


def _parse_header(path: Path, lineno: int, fields: List[str]) -> Tuple[int, int, int]:
    if len(fields) != 3:
        raise SMATFormatError(path, lineno, f"expected 'rows cols nonzeros', got {' '.join(fields)!r}")
    try:
        rows, cols, nnz = (int(x) for x in fields)
    except ValueError:
        raise SMATFormatError(path, lineno, f"non-integer header {' '.join(fields)!r}") from None
    if min(rows, cols, nnz) < 0:
        raise SMATFormatError(path, lineno, "header values must be non-negative")
    return rows, cols, nnz


def read_smat(filepath: PathLike) -> scipy.sparse.csr_matrix:
    """
    Read an SMAT file into a sparse matrix.

    Parameters
    ----------
    filepath : str or Path
        Path to the SMAT file

    Returns
    -------
    scipy.sparse.csr_matrix
        ``rows x cols`` matrix with float values

    Raises
    ------
    SMATFormatError
        If the header or an entry line is malformed, an index is out of
        range, or the number of entries differs from the header.
    FileNotFoundError
        If the file does not exist.
    """
    path = Path(filepath)
    lines = _data_lines(path)

    try:
        lineno, fields = next(lines)
    except StopIteration:
        raise SMATFormatError(path, 0, "missing header line") from None
    rows, cols, nnz = _parse_header(path, lineno, fields)

    ei = np.empty(nnz, dtype=np.int64)
    ej = np.empty(nnz, dtype=np.int64)
    vals = np.empty(nnz, dtype=np.float64)

    count = 0
    for lineno, fields in lines:
        if count == nnz:
            raise SMATFormatError(path, lineno, f"more than {nnz} entries")
        if len(fields) != 3:
            raise SMATFormatError(path, lineno, f"expected 'row col value', got {' '.join(fields)!r}")
        try:
            i, j, v = int(fields[0]), int(fields[1]), float(fields[2])
        except ValueError:
            raise SMATFormatError(path, lineno, f"cannot parse entry {' '.join(fields)!r}") from None
        if not (1 <= i <= rows and 1 <= j <= cols):
            raise SMATFormatError(path, lineno, f"entry ({i}, {j}) outside a {rows}x{cols} matrix")

        ei[count], ej[count], vals[count] = i - 1, j - 1, v
        count += 1

    if count != nnz:
        raise SMATFormatError(path, lineno, f"header declares {nnz} entries, found {count}")

    logger.debug(f"Read {path.name}: {rows}x{cols}, {nnz} entries")
    return scipy.sparse.csr_matrix((vals, (ei, ej)), shape=(rows, cols))


def load_matrix_network(filepath: PathLike) -> MatrixNetwork:
    """
    Load an SMAT file as a :class:`MatrixNetwork`.

    The direction tag is computed from the symmetry of the stored matrix.

    Raises
    ------
    ArgumentError
        If the matrix is not square (``SMATFormatError`` for malformed files).
    """
    A = read_smat(filepath)
    if A.shape[0] != A.shape[1]:
        raise ArgumentError(f"{filepath}: a network needs a square matrix, got {A.shape}")
    network = MatrixNetwork.from_scipy(A)
    logger.info(f"Loaded {Path(filepath).name}: n={network.n}, nnz={network.nnz}")
    return network


def write_smat(A: Union[MatrixNetwork, scipy.sparse.spmatrix], filepath: PathLike) -> Path:
    """
    Write a network or sparse matrix in SMAT format.

    Every stored entry of a :class:`MatrixNetwork` is written, including
    repeated pairs, so reading the file back sums them.

    Returns
    -------
    Path
        The path written
    """
    path = Path(filepath)
    if isinstance(A, MatrixNetwork):
        rows = cols = A.n
        ei, ej = A.edge_list()
        vals = A.vals
    else:
        coo = scipy.sparse.coo_matrix(A)
        rows, cols = coo.shape
        ei, ej, vals = coo.row, coo.col, coo.data

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{rows} {cols} {len(vals)}\n")
        for i, j, v in zip(ei.tolist(), ej.tolist(), vals.tolist()):
            f.write(f"{i + 1} {j + 1} {v:.17g}\n")

    logger.info(f"Saved {len(vals)} entries to {path}")
    return path
