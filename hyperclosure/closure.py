"""
Face expansion and weight aggregation.

A k-simplex with weight w passes w, unmodified, to each of its k+1 faces of
dimension k-1. Dimensions are processed from the top down, so faces that were
themselves generated keep propagating until dimension 0. Duplicate faces are
merged by summing weights.

A single d-simplex has 2^(d+1) - 2 proper non-empty faces, so closing a
complex whose top dimension is in the twenties is not feasible; use
closure_size_bound() / max_faces to check before running.
"""

import itertools
import logging
from math import comb

import numpy as np
from tqdm import tqdm

from hyperclosure.simplicial_complex import SimplicialComplex

logger = logging.getLogger(__name__)


class ClosureTooLargeError(RuntimeError):
    pass


def faces(simplex):
    """All (k-1)-faces of a k-simplex, each as a sorted tuple."""
    k = len(simplex) - 1
    if k < 1:
        return []
    return [tuple(sorted(f)) for f in itertools.combinations(simplex, k)]


def expand_dimension(sc, dim, progress=False):
    """Emit the immediate faces of every row at `dim` into `dim - 1`.

    Only the rows present when the pass starts are expanded. Returns the
    number of raw faces emitted.
    """
    if dim <= 0:
        return 0
    source = list(sc.rows(dim))
    if not source:
        return 0
    if progress:
        source = tqdm(source, desc=f"dim {dim} -> {dim - 1}", unit="simplex")

    emitted = 0
    for simplex, w in source:
        for face in faces(simplex):
            sc.insert(dim - 1, face, w)
            emitted += 1
    logger.debug("dim %d: %d rows -> %d faces at dim %d", dim, len(source), emitted, dim - 1)
    return emitted


def aggregate_all(sc):
    for dim in sc.dimensions:
        sc.aggregate(dim)
    return sc


def closure_size_bound(sc):
    """Upper bound on the number of distinct faces per dimension after closure.

    Counts distinct input simplices, so it can be taken before aggregating.
    Entries are exact Python ints.
    """
    top = sc.max_dimension
    if top < 0:
        return np.zeros(0, dtype=object)
    bound = np.zeros(top + 1, dtype=object)
    for dim in sc.dimensions:
        n_distinct = len(sc.weights(dim))
        bound[:dim + 1] += np.array([n_distinct * comb(dim + 1, k + 1) for k in range(dim + 1)],
                                    dtype=object)
    return bound


def close_complex(sc, progress=False, max_faces=None):
    """Close `sc` under taking faces and merge duplicates, in place.

    Returns the same SimplicialComplex. A run refused by `max_faces` leaves
    `sc` untouched.
    """
    top = sc.max_dimension
    if top < 0:
        logger.info("empty complex, nothing to close")
        return sc

    if max_faces is not None:
        bound = int(closure_size_bound(sc).sum())
        if bound > max_faces:
            raise ClosureTooLargeError(
                f"closure may hold up to {bound} simplices (top dimension {top}), "
                f"limit is {max_faces}")

    # input tables are not guaranteed distinct
    aggregate_all(sc)

    emitted = {}
    for dim in range(top, 0, -1):
        # merge faces reached from several parents so each is expanded once
        sc.aggregate(dim)
        emitted[dim - 1] = expand_dimension(sc, dim, progress=progress)

    aggregate_all(sc)
    logger.info("closed complex up to dimension %d: %s", top,
                ", ".join(f"{d}: {sc.num_rows(d)}" for d in range(top + 1)))
    logger.debug("raw faces emitted per dimension: %s", emitted)
    return sc


def close_rows(rows_by_dim, progress=False, max_faces=None):
    """Close a {dimension: rows} mapping and return {dimension: {labels: weight}}."""
    sc = SimplicialComplex.from_rows(rows_by_dim)
    close_complex(sc, progress=progress, max_faces=max_faces)
    return sc.to_dict()
