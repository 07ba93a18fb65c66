import json

from code_analyzer.main import main


def test_sample_run(capsys):
    assert main(["--log-level", "ERROR"]) == 0
    out = capsys.readouterr().out
    assert "1. Classes: 4" in out
    assert "3. Methods: 5" in out
    assert "UserService.addUser -> [save, trim]" in out


def test_project_run_with_threshold(capsys, write_tree):
    root = write_tree({
        "A.java": "class A { void foo() { bar(); } }",
        "B.java": "class B { void bar(int x) { } void qux() { } }",
    })
    assert main([str(root), "--min-methods", "2", "--log-level", "ERROR"]) == 0
    out = capsys.readouterr().out
    assert "11. Classes with at least 2 methods:\n   B (2 methods)" in out


def test_json_to_stdout(capsys, write_tree):
    root = write_tree({"A.java": "class A { void foo() { bar(); } }"})
    assert main([str(root), "--json", "-", "--log-level", "ERROR"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["calls"] == [{"caller": "A.foo", "callee": "bar"}]


def test_json_to_file(tmp_path, write_tree, capsys):
    root = write_tree({"A.java": "class A {}"})
    out_file = tmp_path / "out.json"
    assert main([str(root), "--json", str(out_file), "--log-level", "ERROR"]) == 0
    assert json.loads(out_file.read_text(encoding="utf-8"))["report"]["class_count"] == 1


def test_invalid_threshold_is_rejected(capsys):
    assert main(["--min-methods", "lots", "--log-level", "ERROR"]) == 2
    assert "threshold must be a non-negative integer" in capsys.readouterr().err


def test_negative_threshold_is_rejected(capsys):
    assert main(["--min-methods", "-3", "--log-level", "ERROR"]) == 2


def test_missing_root_fails(tmp_path):
    assert main([str(tmp_path / "missing"), "--log-level", "ERROR"]) == 1
