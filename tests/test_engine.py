import pytest

from synce.engine import (
    ASTNode,
    Compiler,
    Instruction,
    IRBlock,
    IRCache,
    OpCode,
)


def test_optimize_folds_two_plus_two():
    compiler = Compiler()
    compiler.load_source("x = 2 +  2; y = 2+2")
    assert compiler.optimize() == "x = 4; y = 4"
    assert compiler.source == "x = 4; y = 4"


def test_optimize_leaves_other_expressions():
    compiler = Compiler()
    compiler.load_source("x = 3 + 2")
    compiler.optimize()
    assert compiler.source == "x = 3 + 2"


def test_parse_builds_program_root():
    compiler = Compiler()
    root = compiler.parse()
    assert root.type == "program"
    assert root.children == [ASTNode("const", "2+2")]
    assert compiler.root is root


def test_generate_ir_loads_and_prints_constant():
    compiler = Compiler()
    block = compiler.generate_ir()
    assert block.instructions == [
        Instruction(OpCode.LOAD, 0, 4, 0),
        Instruction(OpCode.PRINT, 0, 0, 0),
    ]
    assert compiler.ir == block


def test_generate_ir_caches_block():
    compiler = Compiler()
    block = compiler.generate_ir()
    assert compiler.cache.exists("hash_of_4")
    assert compiler.cache.load("hash_of_4") == block


def test_cache_missing_key_raises():
    cache = IRCache()
    assert not cache.exists("nothing")
    with pytest.raises(KeyError):
        cache.load("nothing")


def test_cache_stores_independent_copy():
    cache = IRCache()
    block = IRBlock([Instruction(OpCode.ADD, 1, 2, 3)])
    cache.store("k", block)
    block.instructions.append(Instruction(OpCode.RET))
    assert cache.load("k").instructions == [Instruction(OpCode.ADD, 1, 2, 3)]


def test_cache_store_replaces():
    cache = IRCache()
    cache.store("k", IRBlock([Instruction(OpCode.ADD)]))
    cache.store("k", IRBlock([Instruction(OpCode.SUB)]))
    assert cache.load("k").instructions == [Instruction(OpCode.SUB)]


def test_generated_opcodes_follow_declaration_numbering():
    compiler = Compiler()
    block = compiler.generate_ir()
    assert [int(instr.op) for instr in block.instructions] == [0, 9]