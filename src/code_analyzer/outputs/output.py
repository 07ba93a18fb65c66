import json
from dataclasses import asdict
from typing import Optional

import networkx as nx

from code_analyzer.call_graph import CallGraph
from code_analyzer.inputs.directory_scanning import ScanResult
from code_analyzer.statistics import AnalysisReport


# --- Pretty printing & JSON export ------------------------------------------

def format_report(report: AnalysisReport, show_graph: bool = True) -> str:
    """
    Human-friendly rendering of an AnalysisReport.
    """
    lines = [
        "=== CODE STATISTICS ===",
        f"1. Classes: {report.class_count}",
        f"2. Lines of code: {report.total_lines}",
        f"3. Methods: {report.total_methods}",
        f"4. Packages: {report.package_count}",
        f"5. Average methods per class: {report.avg_methods_per_class:.2f}",
        f"6. Average lines per method: {report.avg_lines_per_method:.2f}",
        f"7. Average attributes per class: {report.avg_attributes_per_class:.2f}",
        "",
        "8. Top 10% classes by method count:",
    ]
    lines += [f"   {c.name} ({c.method_count} methods)" for c in report.top_classes_by_methods]
    lines += ["", "9. Top 10% classes by attribute count:"]
    lines += [f"   {c.name} ({c.attribute_count} attributes)" for c in report.top_classes_by_attributes]
    lines += ["", "10. Classes in both rankings:"]
    lines += [f"   {c.name}" for c in report.top_classes_in_both]
    if report.classes_over_threshold is not None:
        lines += ["", f"11. Classes with at least {report.threshold} methods:"]
        lines += [f"   {c.name} ({c.method_count} methods)" for c in report.classes_over_threshold]
    lines += ["", "12. Top 10% methods by line count:"]
    lines += [
        f"   {m.qualified_name} ({m.method.line_count} lines)" for m in report.top_methods_by_length
    ]
    lines += ["", f"13. Max parameter count: {report.max_parameter_count}"]

    lines += ["", format_call_graph(report, show_graph=show_graph)]
    return "\n".join(lines)


def format_call_graph(report: AnalysisReport, show_graph: bool = True) -> str:
    """
    The call-graph section: one `caller -> [callees]` line per caller, then
    depth and most-called summary.
    """
    lines = ["=== CALL GRAPH ==="]
    if show_graph:
        for caller, callees in report.call_graph_edges.items():
            lines.append(f"{caller} -> [{', '.join(callees)}]")
        lines.append("")
    lines.append(f"Max call depth: {report.max_call_depth}")
    if report.most_called_method is None:
        lines.append("Most called method: (none)")
    else:
        lines.append(f"Most called method: {report.most_called_method}")
        lines.append(f"Called by: {', '.join(report.most_called_callers)}")
    return "\n".join(lines)


def print_summary(report: AnalysisReport, show_graph: bool = True):
    print(format_report(report, show_graph=show_graph))


def to_dict(result: ScanResult, report: Optional[AnalysisReport] = None) -> dict:
    """
    Plain-data view of a scan (and optionally its report), safe for json.dumps.
    """
    inventory = result.inventory
    out = {
        "packages": sorted(inventory.packages),
        "classes": [
            {
                "name": ci.name,
                "package": ci.package,
                "attributes": ci.attribute_count,
                "methods": [asdict(mi) for mi in ci.methods],
            }
            for ci in inventory.classes
        ],
        "calls": [
            {"caller": caller, "callee": callee} for caller, callee in result.call_graph.edges()
        ],
        "diagnostics": [asdict(d) for d in result.diagnostics],
        "filesScanned": result.files_scanned,
        "cancelled": result.cancelled,
    }
    if report is not None:
        out["report"] = asdict(report)
    return out


def to_json(result: ScanResult, report: Optional[AnalysisReport] = None) -> str:
    return json.dumps(to_dict(result, report), indent=2)


def to_networkx(call_graph: CallGraph) -> nx.DiGraph:
    """
    Copies the call graph into a networkx DiGraph for layout/visualization.
    Nodes that only ever appear as callees are flagged `caller=False`.
    """
    graph = nx.DiGraph()
    callers = set(call_graph.iter_callers())
    for method in call_graph.iter_methods():
        graph.add_node(method, caller=method in callers)
    graph.add_edges_from(call_graph.edges())
    return graph
