from typing import Optional

from loguru import logger
from tree_sitter import Language, Node, Parser, Tree
import tree_sitter_java

from code_analyzer.errors import FileParseError
from code_analyzer.models.ast_models import FactSheet, MethodCall, MethodFacts, TypeFacts
from code_analyzer.tree_sitter_helpers import (
    first_error_node,
    iter_preorder,
    node_line_span,
    node_point,
    node_text,
)

TYPE_DECLARATIONS = ("class_declaration", "interface_declaration")
FIELD_DECLARATIONS = ("field_declaration", "constant_declaration")
PARAMETER_NODES = ("formal_parameter", "spread_parameter")


# --- Tree-sitter language loading -------------------------------------------

def load_java_language() -> Language:
    """Loads the Tree-sitter Java grammar shipped by the tree-sitter-java wheel."""
    return Language(tree_sitter_java.language())


# --- The source unit parser --------------------------------------------------

class JavaSourceParser:
    """
    Walks a Tree-sitter Java AST and produces a FactSheet:
    package -> types -> methods -> calls.

    Syntax-only: call targets are recorded by simple name, never resolved to
    the declaring class.
    """

    def __init__(self):
        self.language = load_java_language()
        self.parser = Parser(self.language)

    def parse(self, source: str, file_path: Optional[str] = None) -> FactSheet:
        """
        Parses one Java compilation unit. Raises FileParseError when the unit
        contains syntax errors.
        """
        source_bytes = source.encode("utf-8")
        tree: Tree = self.parser.parse(source_bytes)
        root: Node = tree.root_node

        if root.has_error:
            bad = first_error_node(root)
            line = node_point(bad)[0] + 1 if bad is not None else 1
            raise FileParseError(file_path or "<memory>", f"syntax error near line {line}")

        sheet = FactSheet(package=self._find_package(source_bytes, root))
        for node in iter_preorder(root):
            if node.type in TYPE_DECLARATIONS:
                sheet.types.append(self._index_type(source_bytes, node))
        logger.debug(
            "Parsed {} ({} types)", file_path or "<memory>", len(sheet.types)
        )
        return sheet

    # -- AST helpers ----------------------------------------------------------

    def _find_package(self, source_bytes: bytes, root: Node) -> Optional[str]:
        """
        Grabs the package name from a 'package_declaration' node if present.
        """
        for child in root.children:
            if child.type == "package_declaration":
                for part in child.named_children:
                    if part.type in ("identifier", "scoped_identifier"):
                        return node_text(source_bytes, part)
        return None

    def _index_type(self, source_bytes: bytes, node: Node) -> TypeFacts:
        name_node = node.child_by_field_name("name")
        facts = TypeFacts(
            name=node_text(source_bytes, name_node) if name_node else "<anonymous>",
            line_count=node_line_span(node),
            field_count=0,
        )
        body = node.child_by_field_name("body")
        if body is None:
            return facts

        # Only direct members count; nested types are indexed on their own.
        for member in body.named_children:
            if member.type in FIELD_DECLARATIONS:
                facts.field_count += 1
            elif member.type == "method_declaration":
                facts.methods.append(self._index_method(source_bytes, member))
        return facts

    def _index_method(self, source_bytes: bytes, node: Node) -> MethodFacts:
        """
        Pulls out a method's name and parameter count, then finds all
        method_invocation nodes within its subtree.
        """
        name_node = node.child_by_field_name("name")
        params_node = node.child_by_field_name("parameters")
        param_count = 0
        if params_node is not None:
            param_count = sum(1 for p in params_node.named_children if p.type in PARAMETER_NODES)

        method = MethodFacts(
            name=node_text(source_bytes, name_node) if name_node else "<anonymous>",
            param_count=param_count,
            line_count=node_line_span(node),
        )
        self._collect_calls_in_method(source_bytes, node, method)
        return method

    def _collect_calls_in_method(self, source_bytes: bytes, method_node: Node, method: MethodFacts):
        """
        Finds `method_invocation` nodes and captures the simple method name,
        the receiver text (if present) and the call's position.
        """
        for node in iter_preorder(method_node):
            if node.type != "method_invocation":
                continue
            name_node = node.child_by_field_name("name")
            obj_node = node.child_by_field_name("object")  # present for calls like obj.save()
            call_name = node_text(source_bytes, name_node) if name_node else "<unknown>"
            receiver = node_text(source_bytes, obj_node) if obj_node else None
            line, col = node_point(node)
            method.calls.append(MethodCall(call_name, receiver, line, col))
