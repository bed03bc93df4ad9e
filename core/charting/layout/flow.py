"""Validation of index-addressed flow data (Sankey and alluvial charts)."""

from __future__ import annotations

import networkx as nx

from mockdata.dto import FlowData

from ..errors import ChartRenderError


def flow_graph(data: FlowData) -> nx.DiGraph:
    """Return the flows as a directed graph with summed `value` edge weights.

    Raises:
        ChartRenderError: For links to missing nodes, negative values or a
            circular flow.
    """

    graph = nx.DiGraph()
    graph.add_nodes_from(range(len(data.nodes)))
    for i, link in enumerate(data.links):
        if not (0 <= link.source < len(data.nodes) and 0 <= link.target < len(data.nodes)):
            raise ChartRenderError(f"Flow link {i} references a missing node.")
        if link.value < 0:
            raise ChartRenderError(f"Flow link {i} has a negative value.")
        if graph.has_edge(link.source, link.target):
            graph[link.source][link.target]["value"] += link.value
        else:
            graph.add_edge(link.source, link.target, value=link.value)
    if not nx.is_directed_acyclic_graph(graph):
        raise ChartRenderError("Flow data contains a circular link.")
    return graph


def throughput(graph: nx.DiGraph, node: int) -> float:
    """Larger of a node's inbound and outbound totals."""

    inbound = graph.in_degree(node, weight="value")
    outbound = graph.out_degree(node, weight="value")
    return float(max(inbound, outbound))
