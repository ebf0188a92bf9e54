# synce

A compact toolchain for the Synce scripting language, together with a handful
of runtime building blocks used around it. It has no third-party dependencies.

## The compiler pipeline

Source text goes through these stages:

1. `synce.lexer`: `lex_source(text)` and `lex_file(filename)` turn text into
   `Token`s (`TokenType.IDENTIFIER`, `KEYWORD`, `NUMBER`, `STRING`, `SYMBOL`),
   ending with an `END_OF_FILE` token. Lines are numbered from 1, columns from 0.
2. `synce.parser`: `parse_tokens(tokens)` builds an `ASTNode` tree under a
   `PROGRAM` node. The only statement it understands is `let name = expr`,
   which becomes a `DECLARATION` holding a `LITERAL` or `IDENTIFIER`; any
   other token is skipped.
3. `synce.ir`: `generate_ir(root, start=700)` writes one IR line per
   declaration, literal and identifier. Each line carries a running code
   printed in octal with a leading `0`, so the default start of 700 gives
   `01274 DECL answer`, `01275 LIT 42`, and so on. `IRGenerator` keeps the
   counter across calls; `save_output` and `read_input` write and read text
   files (`read_input` returns `""` for a file it cannot open).
4. `synce.hexast`: `generate_hex_ast(nodes, indent=False, start=0xA00)` dumps
   one node or a sequence of nodes as hex-numbered `NODE` / `LEAF` / `ENDNODE`
   lines, with two spaces per nesting level when `indent` is true.
5. `synce.codegen`: turns IR into NASM, C, C++, Python, Go, Rust, JavaScript
   or Java source, either through `generate_nasm`, `generate_c` and friends
   or through `generate(ir, Target.PYTHON)` (a `Target` value string such as
   `"go"` also works).
6. `synce.jit`: `jit_compile(nasm_code, workdir="output")` assembles and
   links NASM code by running the external `nasm` and `ld` tools and returns
   the binary as bytes, or empty bytes when the tools are missing or produce
   nothing. The module also has `save_binary`, `load_binary`, `read_file`,
   `write_file` and a `TempFileNamer` handing out names such as
   `output/tmp_0.s`.

```python
from synce.lexer import lex_source
from synce.parser import parse_tokens
from synce.ir import generate_ir
from synce.codegen import generate_python

ast = parse_tokens(lex_source("let answer = 42\n"))
ir = generate_ir(ast)
print(ir)                    # 01274 DECL answer / 01275 LIT 42
print(generate_python(ir))
```

## Command line

```
syncec program.synce
```

runs the whole pipeline (`synce.cli.compile_file`) and writes
`program.oct` (IR), `program.ast.hex`, `program.asm` and `program.bin` into
an `output` directory. Building the binary needs `nasm` and `ld` on the
`PATH`; without them `program.bin` is written empty. The command exits with
status 1 when no file is given or the file cannot be read.

## Runtime pieces

- `synce.engine`: `Compiler` (`load_source`, `parse`, `optimize`, which folds
  `2 + 2` into `4`, and `generate_ir`), `IRBlock`, `Instruction`, `OpCode`
  and an `IRCache` keyed by string.
- `synce.vm`: a `VM` with sixteen integer registers that runs an `IRBlock`
  (`execute`, `execute_async` on a worker thread, `hot_swap`). It carries out
  `LOAD` and `PRINT`; other opcodes are ignored.
- `synce.aot`: `render_nasm`, `write_nasm` and `compile_to_executable` for
  `IRBlock`s, the last again using `nasm` and `ld`.
- `synce.interpreter`: a line-based `ScriptInterpreter` with built-in `print`
  and `wait` (milliseconds) commands; `register` adds more.
- `synce.fsm`: an `FSM` with named states and guarded transitions, and a bare
  `FSMNode`. `synce.campaign`: a `CampaignAI` moving between `CALM`, `ALERT`
  and `ESCALATED` as chaos and resolve weights change.
- `synce.score`: a `ScoreEngine` that scores events as ten times the square
  root of magnitude times weight and averages them.
- `synce.synth`: an `AudioSynth` that decodes four characters per
  `WaveformNode`, renders sine, square, triangle, saw and noise samples at
  44100 Hz, and prints one sample per tenth of a second with `play`.
  `synce.wave`: `generate_wave` and `process_audio_frame` for single samples.
- `synce.physics`: a bouncing `Ball`. `synce.terrain`: a sine–cosine
  height-field `Terrain` that yields its cells as `quads`.
- `synce.pool`: `MemoryPool` and `NodePool` object pools.
  `synce.pathfinding`: `PathNode` and `compute_path_score`.

## What it does not do

- Nothing is drawn: there is no window, shader or GPU rendering. `Terrain`
  and the other pieces only produce data.
- Nothing is played through a sound device: `AudioSynth.play` prints samples
  to standard output.
- The language is tiny: only `let` declarations reach the IR, and machine
  code is produced only by the external `nasm` and `ld` tools.

## Tests

```
pip install -e .[test]
pytest
```