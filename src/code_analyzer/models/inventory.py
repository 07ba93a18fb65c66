# --- Project inventory: classes, methods and running totals -------------------
from dataclasses import dataclass, field
from typing import Optional

from code_analyzer.models.ast_models import MethodCall


@dataclass(frozen=True)
class MethodInfo:
    """A method as recorded in the inventory. Names are not unique."""
    name: str
    line_count: int
    param_count: int
    calls: tuple[MethodCall, ...] = ()  # call sites in source order


@dataclass
class ClassInfo:
    """One class/interface declaration; methods kept in declaration order."""
    name: str
    methods: list[MethodInfo] = field(default_factory=list)
    attribute_count: int = 0
    package: Optional[str] = None

    @property
    def method_count(self) -> int:
        return len(self.methods)


@dataclass(frozen=True)
class RankedMethod:
    """A method paired with the class that declares it."""
    class_name: str
    method: MethodInfo

    @property
    def qualified_name(self) -> str:
        return f"{self.class_name}.{self.method.name}"


@dataclass
class Inventory:
    """
    All classes seen during a scan plus running totals. Only the scanner
    mutates it; everything downstream treats it as read-only.
    """
    classes: list[ClassInfo] = field(default_factory=list)
    packages: set[str] = field(default_factory=set)
    total_lines: int = 0
    total_methods: int = 0
    total_attributes: int = 0

    def add_class(self, class_info: ClassInfo, line_count: int) -> None:
        self.classes.append(class_info)
        self.total_methods += class_info.method_count
        self.total_attributes += class_info.attribute_count
        self.total_lines += line_count

    def add_package(self, package: Optional[str]) -> None:
        if package:
            self.packages.add(package)

    @property
    def class_count(self) -> int:
        return len(self.classes)

    @property
    def package_count(self) -> int:
        return len(self.packages)

    def iter_methods(self):
        """Yields every (class, method) pair in encounter order."""
        for class_info in self.classes:
            for method in class_info.methods:
                yield RankedMethod(class_info.name, method)
