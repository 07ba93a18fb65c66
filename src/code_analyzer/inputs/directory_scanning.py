# --- Directory scanning ------------------------------------------------------
import os
import threading
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from code_analyzer.call_graph import CallGraph
from code_analyzer.config import AnalyzerConfig
from code_analyzer.errors import DirectoryListError, FileParseError, ScanDiagnostic, ScanError
from code_analyzer.indexer import JavaSourceParser
from code_analyzer.models.ast_models import FactSheet
from code_analyzer.models.inventory import ClassInfo, Inventory, MethodInfo


def read_text(path: str, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding, errors="replace") as f:
        return f.read()


@dataclass
class ScanResult:
    """Inventory and call graph of one run, plus whatever went wrong on the way."""
    inventory: Inventory = field(default_factory=Inventory)
    call_graph: CallGraph = field(default_factory=CallGraph)
    diagnostics: list[ScanDiagnostic] = field(default_factory=list)
    files_scanned: int = 0
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return not self.diagnostics


class ProjectScanner:
    """
    Walks a source tree depth-first, hands every source file to the parser
    and merges the resulting fact sheets into an Inventory and a CallGraph.

    Per-file and per-directory failures are recorded as diagnostics; only a
    missing or unreadable root aborts the scan.
    """

    def __init__(self, parser=None, config: Optional[AnalyzerConfig] = None):
        self.parser = parser or JavaSourceParser()
        self.config = config or AnalyzerConfig.from_env()

    def scan(self, root_dir: str, cancel: Optional[threading.Event] = None) -> ScanResult:
        if not os.path.isdir(root_dir):
            raise ScanError(f"Not a directory: {root_dir}")
        if not os.access(root_dir, os.R_OK | os.X_OK):
            raise ScanError(f"Directory is not readable: {root_dir}")

        result = ScanResult()

        def on_walk_error(err: OSError):
            path = err.filename or root_dir
            self._record(result, DirectoryListError(path, err.strerror or str(err)))

        logger.info("Scanning {}", root_dir)
        for dirpath, dirnames, filenames in os.walk(root_dir, onerror=on_walk_error, followlinks=True):
            dirnames.sort()
            for fn in sorted(filenames):
                if not fn.endswith(self.config.source_suffix):
                    continue
                if cancel is not None and cancel.is_set():
                    logger.warning("Scan cancelled after {} files", result.files_scanned)
                    result.cancelled = True
                    return result
                self._scan_file(result, os.path.join(dirpath, fn))

        logger.info(
            "Scanned {} files: {} classes, {} methods, {} failures",
            result.files_scanned,
            result.inventory.class_count,
            result.inventory.total_methods,
            len(result.diagnostics),
        )
        return result

    def scan_source(self, source: str, file_path: str = "<memory>") -> ScanResult:
        """Indexes a single in-memory compilation unit."""
        result = ScanResult()
        try:
            sheet = self.parser.parse(source, file_path)
        except FileParseError as e:
            self._record(result, e)
            return result
        result.files_scanned = 1
        merge_fact_sheet(result.inventory, result.call_graph, sheet)
        return result

    def _scan_file(self, result: ScanResult, path: str) -> None:
        try:
            src = read_text(path, self.config.encoding)
            sheet = self.parser.parse(src, path)
        except FileParseError as e:
            self._record(result, e)
            return
        except (OSError, UnicodeError) as e:
            self._record(result, FileParseError(path, str(e)))
            return
        result.files_scanned += 1
        merge_fact_sheet(result.inventory, result.call_graph, sheet)

    @staticmethod
    def _record(result: ScanResult, error) -> None:
        logger.warning("Skipping {}", error)
        result.diagnostics.append(ScanDiagnostic.from_error(error))


def merge_fact_sheet(inventory: Inventory, call_graph: CallGraph, sheet: FactSheet) -> None:
    """
    Folds one file's facts into the project-wide inventory and call graph.
    Every call becomes an edge `Class.method -> callee`, resolved or not.
    """
    inventory.add_package(sheet.package)
    for type_facts in sheet.types:
        class_info = ClassInfo(
            name=type_facts.name,
            attribute_count=type_facts.field_count,
            package=sheet.package,
        )
        for method_facts in type_facts.methods:
            class_info.methods.append(
                MethodInfo(
                    method_facts.name,
                    method_facts.line_count,
                    method_facts.param_count,
                    tuple(method_facts.calls),
                )
            )
            caller = f"{type_facts.name}.{method_facts.name}"
            for call in method_facts.calls:
                call_graph.add_call(caller, call.name)
        inventory.add_class(class_info, type_facts.line_count)
