# --- Fact sheet: what the parser extracts from one source file ----------------
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class MethodCall:
    """Represents a method call found inside a method body."""
    name: str  # simple method name being called (e.g., "save", "println")
    receiver: Optional[str]  # text of the call's receiver/object if present (e.g., "this.repo", "System.out")
    line: int
    col: int


@dataclass
class MethodFacts:
    """A method declaration as seen by the parser."""
    name: str
    param_count: int
    line_count: int
    calls: list[MethodCall] = field(default_factory=list)


@dataclass
class TypeFacts:
    """A class or interface declaration as seen by the parser."""
    name: str  # simple name, e.g. "UserService"
    line_count: int
    field_count: int
    methods: list[MethodFacts] = field(default_factory=list)


@dataclass
class FactSheet:
    """Everything extracted from a single compilation unit."""
    package: Optional[str]
    types: list[TypeFacts] = field(default_factory=list)
