import textwrap

import pytest

from code_analyzer.errors import FileParseError

SOURCE = textwrap.dedent("""\
    package com.acme.demo;

    import java.util.*;

    public class UserService {
        private final UserRepository repo = new UserRepository();
        private int a, b;

        public UserService() {
            init();
        }

        public User addUser(String name, int age) {
            repo.save(name);
            String trimmed = StringUtils.trim(name);
            return new User(trimmed);
        }

        public void log(String fmt, Object... args) {
            System.out.println(String.format(fmt, args));
        }

        static class StringUtils {
            static String trim(String s) { return s.trim(); }
        }
    }

    interface Shape {
        int SIDES = 4;
        double area();
    }

    enum Color { RED, GREEN }
""")


@pytest.fixture
def sheet(java_parser):
    return java_parser.parse(SOURCE, "UserService.java")


def test_package_name(sheet):
    assert sheet.package == "com.acme.demo"


def test_no_package(java_parser):
    assert java_parser.parse("class A {}").package is None


def test_types_in_source_order(sheet):
    assert [t.name for t in sheet.types] == ["UserService", "StringUtils", "Shape"]


def test_fields_are_declarations_not_variables(sheet):
    service, utils, shape = sheet.types
    assert service.field_count == 2
    assert utils.field_count == 0
    assert shape.field_count == 1


def test_constructors_and_nested_methods_are_excluded(sheet):
    service = sheet.types[0]
    assert [m.name for m in service.methods] == ["addUser", "log"]
    assert [m.name for m in sheet.types[1].methods] == ["trim"]
    assert [m.name for m in sheet.types[2].methods] == ["area"]


def test_parameter_counts_include_varargs(sheet):
    add_user, log = sheet.types[0].methods
    assert add_user.param_count == 2
    assert log.param_count == 2
    assert sheet.types[2].methods[0].param_count == 0


def test_line_counts(sheet):
    add_user, log = sheet.types[0].methods
    assert add_user.line_count == 5
    assert log.line_count == 3
    assert sheet.types[1].methods[0].line_count == 1
    assert sheet.types[0].line_count == 22


def test_calls_are_collected_in_source_order(sheet):
    add_user, log = sheet.types[0].methods
    assert [c.name for c in add_user.calls] == ["save", "trim"]
    assert add_user.calls[0].receiver == "repo"
    assert add_user.calls[1].receiver == "StringUtils"
    assert [c.name for c in log.calls] == ["println", "format"]
    assert log.calls[0].receiver == "System.out"


def test_unqualified_call_has_no_receiver(java_parser):
    sheet = java_parser.parse("class A { void foo() { bar(); } }")
    (call,) = sheet.types[0].methods[0].calls
    assert call.name == "bar"
    assert call.receiver is None
    assert (call.line, call.col) == (0, 23)


def test_syntax_error_raises(java_parser):
    with pytest.raises(FileParseError) as excinfo:
        java_parser.parse("class Broken {\n  void foo( {\n}\n", "Broken.java")
    assert excinfo.value.path == "Broken.java"
    assert "syntax error" in excinfo.value.reason


def test_empty_file_has_no_types(java_parser):
    sheet = java_parser.parse("")
    assert sheet.package is None
    assert sheet.types == []
