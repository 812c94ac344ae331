import networkx as nx

from hyperclosure.simplicial_complex import canonical


def get_cofaces(sc, simplex, dim=None):
    simplex = canonical(simplex)
    if dim is None:
        dim = len(simplex)
    out = []
    for cf, w in sc.rows(dim):
        if set(simplex).issubset(cf):
            out.append((cf, w))
    return out


def generalized_degree(sc, simplex, dim):
    # number of distinct dim-simplices incident to `simplex`
    return len({cf for cf, _ in get_cofaces(sc, simplex, dim)})


def weighted_degree(sc, simplex, dim):
    return sum(w for _, w in get_cofaces(sc, simplex, dim))


def compute_degrees(sc, dim, of_dim=0):
    degrees = {}
    for simplex in sc.weights(of_dim):
        degrees[simplex] = generalized_degree(sc, simplex, dim)
    return degrees


def one_skeleton(sc):
    G = nx.Graph()
    for (v,), w in sc.weights(0).items():
        G.add_node(v, weight=w)
    for (u, v), w in sc.weights(1).items():
        G.add_edge(u, v, weight=w)
    return G
