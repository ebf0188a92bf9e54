import re

import pytest

from synce.ir import IRGenerator, generate_ir, read_input, save_output
from synce.lexer import lex_source
from synce.parser import ASTNode, NodeType, parse_tokens

LINE_RE = re.compile(r"0([0-7]+) (DECL|LIT|ID) (\w+)")


def _ir(source, start=700):
    return generate_ir(parse_tokens(lex_source(source)), start)


def test_lines_follow_format_and_order():
    text = _ir("let x = 5\nlet y = x\n")
    matches = [LINE_RE.fullmatch(line) for line in text.splitlines()]
    assert all(matches)
    assert [(m.group(2), m.group(3)) for m in matches] == [
        ("DECL", "x"), ("LIT", "5"), ("DECL", "y"), ("ID", "x"),
    ]


def test_codes_are_consecutive_from_start():
    for start in (700, 8, 64):
        text = _ir("let a = 1\nlet b = 2\nlet c = a\n", start)
        codes = [int(LINE_RE.fullmatch(l).group(1), 8) for l in text.splitlines()]
        assert codes == list(range(start, start + len(codes)))


def test_default_start_is_700():
    text = generate_ir(parse_tokens(lex_source("let q = 9")))
    first = LINE_RE.fullmatch(text.splitlines()[0])
    assert int(first.group(1), 8) == 700


def test_generator_counter_persists():
    gen = IRGenerator(10)
    tree = parse_tokens(lex_source("let a = 1"))
    first = gen.generate(tree)
    second = gen.generate(tree)
    assert first != second
    assert gen.next_code == 14


def test_unsupported_nodes_emit_nothing():
    gen = IRGenerator()
    assert gen.generate(ASTNode(NodeType.STATEMENT, "s")) == ""
    assert gen.generate(None) == ""
    assert gen.next_code == 700


def test_null_root_raises():
    with pytest.raises(ValueError):
        generate_ir(None)


def test_save_and_read_round_trip(tmp_path):
    content = _ir("let x = 5")
    path = tmp_path / "program.oct"
    save_output(content, path)
    assert read_input(path) == content


def test_read_missing_returns_empty(tmp_path):
    assert read_input(tmp_path / "nope.oct") == ""


def test_save_to_missing_dir_raises(tmp_path):
    with pytest.raises(OSError):
        save_output("x", tmp_path / "no" / "such" / "file")