"""Build order for a small set of packages.

An edge (a, b) means a has to be built before b.
"""

import depgraph as dg

graph: dg.Graph[str] = dg.Graph()
graph.add_edge("libc", "zlib")
graph.add_edge("libc", "openssl")
graph.add_edge("zlib", "openssl")
graph.add_edge("openssl", "curl")
graph.add_edge("zlib", "curl")
graph.add_node("docs")

# Everything, in an order that respects every edge
print(graph.topological_sort(include_seeds=True))

# What has to follow once libc changes
print(graph.topological_sort(["libc"]))

# Introducing a cycle makes ordering impossible
graph.add_edge("curl", "libc")
try:
    graph.topological_sort()
except dg.CycleError as e:
    print(e)
