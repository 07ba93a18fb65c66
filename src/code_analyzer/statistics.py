"""
Aggregate and ranked metrics over a finished scan.

Everything here is a pure function of an Inventory and a CallGraph; nothing
is printed. Presentation lives in `code_analyzer.outputs.output`.
"""
from dataclasses import dataclass
from typing import Optional

from code_analyzer.call_graph import CallGraph
from code_analyzer.errors import InvalidThresholdError
from code_analyzer.models.inventory import ClassInfo, Inventory, RankedMethod


def top_decile_size(count: int) -> int:
    """`max(1, count // 10)`, or 0 when there is nothing to rank."""
    if count <= 0:
        return 0
    return max(1, count // 10)


def parse_threshold(value) -> int:
    """Accepts a non-negative int or its decimal string form."""
    if isinstance(value, bool):
        raise InvalidThresholdError(value)
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidThresholdError(value)
        return int(text)
    if not isinstance(value, int) or value < 0:
        raise InvalidThresholdError(value)
    return value


def _ratio(numerator: int, denominator: int) -> float:
    return numerator / denominator if denominator else 0.0


@dataclass(frozen=True)
class AnalysisReport:
    class_count: int
    total_lines: int
    total_methods: int
    total_attributes: int
    package_count: int
    avg_methods_per_class: float
    avg_lines_per_method: float
    avg_attributes_per_class: float
    top_classes_by_methods: list[ClassInfo]
    top_classes_by_attributes: list[ClassInfo]
    top_classes_in_both: list[ClassInfo]
    top_methods_by_length: list[RankedMethod]
    max_parameter_count: int
    max_call_depth: int
    most_called_method: Optional[str]
    most_called_callers: list[str]
    call_graph_edges: dict[str, list[str]]
    threshold: Optional[int] = None
    classes_over_threshold: Optional[list[ClassInfo]] = None


class StatisticsEngine:
    def __init__(self, inventory: Inventory, call_graph: CallGraph):
        self.inventory = inventory
        self.call_graph = call_graph

    # -- direct tallies -------------------------------------------------------

    def class_count(self) -> int:
        return self.inventory.class_count

    def total_lines(self) -> int:
        return self.inventory.total_lines

    def total_methods(self) -> int:
        return self.inventory.total_methods

    def total_attributes(self) -> int:
        return self.inventory.total_attributes

    def package_count(self) -> int:
        return self.inventory.package_count

    # -- averages -------------------------------------------------------------

    def average_methods_per_class(self) -> float:
        return _ratio(self.inventory.total_methods, self.inventory.class_count)

    def average_lines_per_method(self) -> float:
        return _ratio(self.inventory.total_lines, self.inventory.total_methods)

    def average_attributes_per_class(self) -> float:
        return _ratio(self.inventory.total_attributes, self.inventory.class_count)

    # -- rankings -------------------------------------------------------------

    def top_classes_by_methods(self) -> list[ClassInfo]:
        # sorted() is stable, so ties keep encounter order
        ranked = sorted(self.inventory.classes, key=lambda c: c.method_count, reverse=True)
        return ranked[:top_decile_size(len(ranked))]

    def top_classes_by_attributes(self) -> list[ClassInfo]:
        ranked = sorted(self.inventory.classes, key=lambda c: c.attribute_count, reverse=True)
        return ranked[:top_decile_size(len(ranked))]

    def top_classes_in_both(self) -> list[ClassInfo]:
        """Classes in both top lists, in top-by-methods order (by identity)."""
        by_attributes = {id(c) for c in self.top_classes_by_attributes()}
        return [c for c in self.top_classes_by_methods() if id(c) in by_attributes]

    def classes_with_min_methods(self, threshold) -> list[ClassInfo]:
        """Classes declaring at least `threshold` methods, in encounter order."""
        minimum = parse_threshold(threshold)
        return [c for c in self.inventory.classes if c.method_count >= minimum]

    def top_methods_by_length(self) -> list[RankedMethod]:
        methods = list(self.inventory.iter_methods())
        methods.sort(key=lambda m: m.method.line_count, reverse=True)
        return methods[:top_decile_size(len(methods))]

    def max_parameter_count(self) -> int:
        return max((m.method.param_count for m in self.inventory.iter_methods()), default=0)

    # -- call graph -----------------------------------------------------------

    def max_call_depth(self) -> int:
        return self.call_graph.get_max_call_depth()

    def most_called_method(self) -> Optional[str]:
        """
        The graph member with the most distinct callers; the first one in
        iteration order wins a tie. None when the graph is empty.
        """
        best, best_count = None, -1
        for method in self.call_graph.iter_methods():
            count = len(self.call_graph.get_callers(method))
            if count > best_count:
                best, best_count = method, count
        return best

    def callers_of(self, method: Optional[str]) -> list[str]:
        """Sorted callers of `method`; empty for None."""
        if method is None:
            return []
        return sorted(self.call_graph.get_callers(method))

    def callers_of_most_called(self) -> list[str]:
        return self.callers_of(self.most_called_method())

    def report(self, threshold=None) -> AnalysisReport:
        most_called = self.most_called_method()
        over = None
        if threshold is not None:
            threshold = parse_threshold(threshold)
            over = self.classes_with_min_methods(threshold)
        return AnalysisReport(
            class_count=self.class_count(),
            total_lines=self.total_lines(),
            total_methods=self.total_methods(),
            total_attributes=self.total_attributes(),
            package_count=self.package_count(),
            avg_methods_per_class=self.average_methods_per_class(),
            avg_lines_per_method=self.average_lines_per_method(),
            avg_attributes_per_class=self.average_attributes_per_class(),
            top_classes_by_methods=self.top_classes_by_methods(),
            top_classes_by_attributes=self.top_classes_by_attributes(),
            top_classes_in_both=self.top_classes_in_both(),
            top_methods_by_length=self.top_methods_by_length(),
            max_parameter_count=self.max_parameter_count(),
            max_call_depth=self.max_call_depth(),
            most_called_method=most_called,
            most_called_callers=self.callers_of(most_called),
            call_graph_edges={
                caller: sorted(self.call_graph.get_callees(caller))
                for caller in self.call_graph.iter_callers()
            },
            threshold=threshold,
            classes_over_threshold=over,
        )
