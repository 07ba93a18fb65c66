from typing import Iterator


class CallGraph:
    """
    Directed call graph keyed by qualified caller name (`Class.method`).

    Callees are stored by the bare name found at the call site, so two
    declared methods sharing a name are the same node as a call target.
    A callee that never calls anything has no entry of its own and is only
    reachable through some caller's callee set. Cycles are allowed.
    """

    def __init__(self):
        # caller -> ordered set of callees (dict keys keep insertion order)
        self._graph: dict[str, dict[str, None]] = {}

    def __eq__(self, other):
        if not isinstance(other, CallGraph):
            return NotImplemented
        return self._graph == other._graph

    def __repr__(self):
        return f"CallGraph(callers={len(self._graph)}, edges={self.edge_count()})"

    def add_call(self, caller: str, callee: str) -> None:
        """Records `caller -> callee`; repeating an edge is a no-op."""
        self._graph.setdefault(caller, {})[callee] = None

    def get_callees(self, method: str) -> set[str]:
        return set(self._graph.get(method, ()))

    def get_callers(self, method: str) -> set[str]:
        """Every caller whose callee set contains `method`. Linear scan."""
        return {caller for caller, callees in self._graph.items() if method in callees}

    def get_all_methods(self) -> set[str]:
        return set(self.iter_methods())

    def iter_methods(self) -> Iterator[str]:
        """
        All graph members without duplicates: caller keys in insertion order,
        then callee-only names in order of first appearance.
        """
        yield from self._graph
        seen = set(self._graph)
        for callees in self._graph.values():
            for callee in callees:
                if callee not in seen:
                    seen.add(callee)
                    yield callee

    def iter_callers(self) -> Iterator[str]:
        return iter(self._graph)

    def edges(self) -> Iterator[tuple[str, str]]:
        for caller, callees in self._graph.items():
            for callee in callees:
                yield caller, callee

    def edge_count(self) -> int:
        return sum(len(callees) for callees in self._graph.values())

    def is_empty(self) -> bool:
        return not self._graph

    def get_max_call_depth(self) -> int:
        """
        Longest call chain (in nodes) starting at any caller, 0 for an empty
        graph. A leaf has depth 1; an edge back into a node still being
        computed contributes 0, so cycles terminate.
        """
        memo: dict[str, int] = {}
        max_depth = 0
        for node in self._graph:
            max_depth = max(max_depth, self._depth(node, memo))
        return max_depth

    def _depth(self, root: str, memo: dict[str, int]) -> int:
        # Iterative post-order walk; long call chains would exhaust the
        # interpreter's recursion limit.
        if root in memo:
            return memo[root]

        visiting = {root}
        # frame: [node, iterator over callees, best child depth so far]
        stack = [[root, iter(self._graph.get(root, ())), 0]]
        while stack:
            frame = stack[-1]
            node, children = frame[0], frame[1]
            pushed = False
            for child in children:
                if child in visiting:
                    continue
                if child in memo:
                    frame[2] = max(frame[2], memo[child])
                    continue
                visiting.add(child)
                stack.append([child, iter(self._graph.get(child, ())), 0])
                pushed = True
                break
            if pushed:
                continue

            stack.pop()
            visiting.discard(node)
            depth = 1 + frame[2]
            memo[node] = depth
            if stack:
                stack[-1][2] = max(stack[-1][2], depth)
        return memo[root]
