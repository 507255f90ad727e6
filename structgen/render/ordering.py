"""Dependency ordering of object declarations."""

from dataclasses import dataclass

import networkx as nx

from ..graph.type_graph import ObjectType
from ..log import get_logger
from .errors import DependencyCycleError
from .expression import Expression
from .naming import Name

logger = get_logger(__name__)


@dataclass(frozen=True)
class ObjectDeclaration:
    """An object type with its assigned name and rendered body."""

    name: Name
    node: ObjectType
    body: Expression


def build_dependency_graph(declarations: list[ObjectDeclaration]) -> nx.DiGraph:
    """Build the reference graph among object declarations.

    Nodes are declaration indices. An edge (a, b) means declaration `a`
    references declaration `b` in its body. Self references add no edge:
    they resolve through the declaration's own name.

    Args:
        declarations: Object declarations in first-seen order.

    Returns:
        A DiGraph over declaration indices.
    """
    graph = nx.DiGraph()
    index_by_name = {decl.name: i for i, decl in enumerate(declarations)}

    for i, decl in enumerate(declarations):
        graph.add_node(i, name=decl.name.identifier)

    for i, decl in enumerate(declarations):
        for ref in decl.body.references():
            target = index_by_name.get(ref)
            if target is None or target == i:
                continue
            graph.add_edge(i, target)

    return graph


def order_objects(declarations: list[ObjectDeclaration]) -> list[ObjectDeclaration]:
    """Order declarations so every referenced object comes before its referrers.

    Among declarations free to go next, the first-seen one goes first, so
    the result is deterministic.

    Args:
        declarations: Object declarations in first-seen order.

    Returns:
        The declarations in emission order.

    Raises:
        DependencyCycleError: If two or more distinct objects reference each
            other cyclically.
    """
    graph = build_dependency_graph(declarations)

    try:
        cycle_edges = nx.find_cycle(graph)
    except nx.NetworkXNoCycle:
        pass
    else:
        path = [u for u, _ in cycle_edges]
        start = path.index(min(path))
        path = path[start:] + path[:start]
        raise DependencyCycleError([declarations[i].name.identifier for i in path])

    # Edges point from referrer to dependency; reversed, dependencies come first
    order = list(nx.lexicographical_topological_sort(graph.reverse()))
    logger.debug(
        "Object emission order: %s",
        ", ".join(declarations[i].name.identifier for i in order),
    )
    return [declarations[i] for i in order]
