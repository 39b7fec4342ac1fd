"""Normalisation of the random source passed to generators."""

from typing import Optional, Union

import numpy as np

SeedLike = Optional[Union[int, np.random.Generator]]


def ensure_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Return a ``numpy.random.Generator`` for ``seed``.

    Parameters
    ----------
    seed : int, np.random.Generator or None
        An existing generator is returned unchanged so callers can thread a
        single stream through several generators. An integer seeds a fresh
        generator. ``None`` draws fresh OS entropy; the legacy global
        ``np.random`` state is never used.

    Returns
    -------
    np.random.Generator

    Examples
    --------
    >>> rng = ensure_rng(42)
    >>> ensure_rng(rng) is rng
    True
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None or isinstance(seed, (int, np.integer)):
        return np.random.default_rng(seed)
    raise TypeError(
        f"seed must be None, an int or a numpy Generator, got {type(seed).__name__}"
    )
