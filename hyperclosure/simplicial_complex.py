import math
from collections import defaultdict


class InvalidSimplexError(ValueError):
    pass


def canonical(labels):
    return tuple(sorted(labels))


class SimplexRows:
    """Read view over the rows of one dimension; iterates current state."""

    def __init__(self, sc, dim):
        self._sc = sc
        self._dim = dim

    def __iter__(self):
        for simplex, w in list(self._sc.simplices.get(self._dim, ())):
            yield simplex, w

    def __len__(self):
        return len(self._sc.simplices.get(self._dim, ()))

    def __repr__(self):
        return f"SimplexRows(dim={self._dim}, n={len(self)})"


class SimplicialComplex:
    def __init__(self):
        # dim -> list of (canonical labels, weight); duplicates allowed until aggregate()
        self.simplices = defaultdict(list)

    @classmethod
    def from_rows(cls, rows_by_dim):
        sc = cls()
        for dim, rows in rows_by_dim.items():
            if isinstance(rows, dict):
                rows = rows.items()
            for labels, w in rows:
                sc.insert(dim, labels, w)
        return sc

    def insert(self, dim, labels, weight=1.0):
        if dim < 0:
            raise InvalidSimplexError(f"dimension must be >= 0, got {dim}")
        simplex = canonical(labels)
        if len(simplex) != dim + 1:
            raise InvalidSimplexError(
                f"a {dim}-simplex needs {dim + 1} labels, got {len(simplex)}: {simplex}")
        if len(set(simplex)) != len(simplex):
            raise InvalidSimplexError(f"repeated label in {simplex}")
        weight = float(weight)
        if not math.isfinite(weight) or weight < 0:
            raise InvalidSimplexError(f"weight must be finite and >= 0, got {weight} for {simplex}")
        self.simplices[dim].append((simplex, weight))

    def add_simplex(self, simplex, weight=1.0):
        self.insert(len(simplex) - 1, simplex, weight)

    def aggregate(self, dim):
        totals = defaultdict(float)
        for simplex, w in self.simplices.get(dim, ()):
            totals[simplex] += w
        if dim in self.simplices:
            self.simplices[dim] = sorted(totals.items())

    def rows(self, dim):
        return SimplexRows(self, dim)

    def weights(self, dim):
        out = defaultdict(float)
        for simplex, w in self.simplices.get(dim, ()):
            out[simplex] += w
        return dict(out)

    @property
    def dimensions(self):
        return sorted(d for d, rows in self.simplices.items() if rows)

    @property
    def max_dimension(self):
        dims = self.dimensions
        return dims[-1] if dims else -1

    def num_rows(self, dim=None):
        if dim is None:
            return sum(len(rows) for rows in self.simplices.values())
        return len(self.simplices.get(dim, ()))

    def __contains__(self, simplex):
        simplex = canonical(simplex)
        return any(s == simplex for s, _ in self.simplices.get(len(simplex) - 1, ()))

    def copy(self):
        sc = SimplicialComplex()
        for dim, rows in self.simplices.items():
            sc.simplices[dim] = list(rows)
        return sc

    def to_dict(self):
        return {dim: self.weights(dim) for dim in self.dimensions}

    def __repr__(self):
        counts = ", ".join(f"{d}: {self.num_rows(d)}" for d in self.dimensions)
        return f"SimplicialComplex({{{counts}}})"
