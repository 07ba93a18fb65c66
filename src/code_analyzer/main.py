#!/usr/bin/env python3
"""
Java Code Analyzer
------------------
Scans a Java source tree and reports:
- class, method, attribute and package counts with averages
- top 10% classes by methods / attributes, and the classes in both
- top 10% longest methods and the largest parameter list
- the call graph, its maximum depth and the most called method

USAGE EXAMPLES
--------------
# 1) Run against an in-code sample (no files needed):
code-analyzer

# 2) Run against a directory of .java files (recursive):
code-analyzer /path/to/java/project --min-methods 5

# 3) Dump everything as JSON:
code-analyzer /path/to/java/project --json report.json
"""

import argparse
import sys

from loguru import logger

from code_analyzer.config import AnalyzerConfig
from code_analyzer.errors import InvalidThresholdError, ScanError
from code_analyzer.inputs.directory_scanning import ProjectScanner
from code_analyzer.logging_setup import configure_logging
from code_analyzer.outputs.output import print_summary, to_json
from code_analyzer.statistics import StatisticsEngine

# --- Demo input --------------------------------------------------------------

SAMPLE_JAVA = r"""
package com.acme.demo;

import java.util.*;

public class UserService {
    private final UserRepository repo = new UserRepository();

    public UserService() {
        System.out.println("UserService constructed");
    }

    public User addUser(String name) {
        repo.save(name);
        String trimmed = StringUtils.trim(name);
        return new User(trimmed);
    }

    public void printAll() {
        List<String> all = repo.findAll();
        for (String n : all) {
            System.out.println(n);
        }
    }

    static class StringUtils {
        static String trim(String s) { return s.trim(); }
    }
}

class UserRepository {
    List<String> store = new ArrayList<>();
    public void save(String name) { store.add(name); }
    public List<String> findAll() { return store; }
}

class User {
    private final String name;
    public User(String name) { this.name = name; }
}
"""


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="code-analyzer", description="Static analysis of a Java source tree.")
    ap.add_argument("path", nargs="?", help="Project root (default: analyze a built-in sample)")
    ap.add_argument("--min-methods", dest="min_methods", default=None,
                    help="Also list classes with at least this many methods")
    ap.add_argument("--json", dest="json_out", default=None,
                    help="Write the full result as JSON to this file ('-' for stdout)")
    ap.add_argument("--no-graph", dest="show_graph", action="store_false",
                    help="Do not list every call graph edge")
    ap.add_argument("--log-level", default=None, help="loguru level (default: from environment or INFO)")
    return ap


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = AnalyzerConfig.from_env()
    configure_logging(args.log_level or config.log_level)

    scanner = ProjectScanner(config=config)
    if args.path:
        try:
            result = scanner.scan(args.path)
        except ScanError as e:
            logger.error("Scan failed: {}", e)
            return 1
    else:
        result = scanner.scan_source(SAMPLE_JAVA, "<sample>")

    for diag in result.diagnostics:
        logger.warning("{} failed ({}): {}", diag.path, diag.kind, diag.reason)

    engine = StatisticsEngine(result.inventory, result.call_graph)
    try:
        report = engine.report(threshold=args.min_methods)
    except InvalidThresholdError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json_out == "-":
        print(to_json(result, report))
    else:
        print_summary(report, show_graph=args.show_graph)
        if args.json_out:
            with open(args.json_out, "w", encoding="utf-8") as f:
                f.write(to_json(result, report))
            logger.info("Wrote {}", args.json_out)

    if result.diagnostics:
        logger.warning("{} file(s) or directories could not be analyzed", len(result.diagnostics))
    return 0


if __name__ == "__main__":
    sys.exit(main())
