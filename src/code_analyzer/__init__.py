"""Static analysis of Java source trees: class inventory, call graph, metrics."""

from code_analyzer.call_graph import CallGraph
from code_analyzer.inputs.directory_scanning import ProjectScanner, ScanResult
from code_analyzer.statistics import AnalysisReport, StatisticsEngine

__all__ = [
    "AnalysisReport",
    "CallGraph",
    "ProjectScanner",
    "ScanResult",
    "StatisticsEngine",
]
