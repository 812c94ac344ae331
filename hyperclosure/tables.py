"""
Flat delimited tables, one per dimension.

Each row holds one column per label followed by a numeric frequency column,
so a table with n+1 columns describes (n-1)-simplices.
"""

import logging
import os

import numpy as np
import pandas as pd

from hyperclosure.simplicial_complex import SimplicialComplex

logger = logging.getLogger(__name__)

WEIGHT_COLUMN = "freq"
DIM_NAMES = {0: "nodes", 1: "edges", 2: "triangles"}


class TableFormatError(ValueError):
    pass


def table_name(stem, dim):
    suffix = DIM_NAMES.get(dim, f"{dim}-simplices")
    return f"{stem}-{suffix}.csv"


def label_columns(dim):
    return [f"V{i + 1}" for i in range(dim + 1)]


def read_table(path, sep=",", weight_column=None):
    """Read one table and return (dimension, rows).

    The frequency column is `weight_column` if given, otherwise the last
    column; every other column is a label. Blank labels are rejected.
    """
    try:
        df = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise TableFormatError(f"{path}: {e}") from e
    if df.shape[1] < 2:
        raise TableFormatError(f"{path}: need at least one label column and a frequency column")

    weight_column = weight_column or df.columns[-1]
    if weight_column not in df.columns:
        raise TableFormatError(f"{path}: no column named {weight_column!r}")
    labels = df.drop(columns=[weight_column])

    blank = np.zeros(len(labels), dtype=bool)
    for col in labels.columns:
        blank |= (labels[col].str.strip() == "").to_numpy(dtype=bool)
    if blank.any():
        bad = int(np.argmax(blank))
        raise TableFormatError(f"{path}: blank label on row {bad + 1}: {tuple(labels.iloc[bad])}")

    weights = pd.to_numeric(df[weight_column], errors="coerce").to_numpy(dtype=np.float64)
    if np.isnan(weights).any():
        bad = int(np.argmax(np.isnan(weights)))
        raise TableFormatError(
            f"{path}: non-numeric {weight_column!r} on row {bad + 1}: {df[weight_column].iloc[bad]!r}")

    dim = labels.shape[1] - 1
    rows = list(zip(map(tuple, labels.to_numpy()), weights.tolist()))
    logger.debug("read %d rows of dimension %d from %s", len(rows), dim, path)
    return dim, rows


def load_complex(paths, sep=",", weight_column=None, sc=None):
    if sc is None:
        sc = SimplicialComplex()
    for path in paths:
        dim, rows = read_table(path, sep=sep, weight_column=weight_column)
        for labels, w in rows:
            sc.insert(dim, labels, w)
    return sc


def complex_to_frame(sc, dim):
    columns = label_columns(dim) + [WEIGHT_COLUMN]
    records = [list(simplex) + [w] for simplex, w in sorted(sc.weights(dim).items())]
    return pd.DataFrame.from_records(records, columns=columns)


def write_complex(sc, out_dir, stem, sep=","):
    os.makedirs(out_dir, exist_ok=True)
    written = []
    for dim in range(sc.max_dimension + 1):
        path = os.path.join(out_dir, table_name(stem, dim))
        complex_to_frame(sc, dim).to_csv(path, sep=sep, index=False)
        written.append(path)
    logger.info("wrote %d tables to %s", len(written), out_dir)
    return written
