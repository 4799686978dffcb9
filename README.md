# minijava

A scanner and recursive-descent parser for MiniJava. It reads a MiniJava
source file and checks that it is lexically and syntactically valid. On the
first error it reports the line and column and stops.

## Installation

```
pip install .
```

The package has no runtime dependencies. Install the `test` extra to run
the test suite with pytest.

## Command line

```
minijava Program.java
```

The same entry point can be run as `python -m minijava.cli Program.java`.

If the file is valid the command prints `Compilação concluida!` and exits
with status 0. On a syntax error it prints a diagnostic to standard output,
such as

```
parser_error.minijava:3:12: erro: Erro de sintaxe: Esperado SEMICOLON (';'), encontrado RBRACE ('}').
```

and exits with status 1. A lexical error (an unknown character, a lone `&`
or `|`, or an unclosed `/* ... */` comment) is reported in the same form on
standard error, with status 1. A missing argument or a file that cannot be
opened also prints a message and gives status 1. Files are read as UTF-8,
with undecodable bytes replaced.

## Library use

```python
from minijava.scanner import Scanner, tokenize, LexicalError
from minijava.parser import Parser, parse, ParseError
from minijava.tokens import TokenKind

tokens = tokenize("class A { }")
assert tokens[0].kind is TokenKind.CLASS
assert tokens[-1].kind is TokenKind.END_OF_FILE

end = parse("""
class Main {
    public static void main(String[] args) {
        System.out.println(1 + 2);
    }
}
""")
assert end.kind is TokenKind.END_OF_FILE
```

- `minijava.tokens` defines `TokenKind` (an `IntEnum` whose `describe()`
  gives the name used in error messages), the frozen dataclass `Token`
  (`kind`, `lexeme`, `line`, `column`) and `CompileError`, which carries
  `message`, `line` and `column` and formats as
  `parser_error.minijava:<line>:<column>: erro: <message>`.
- `minijava.scanner` provides `Scanner`, which gives tokens one at a time
  through `next_token()` or iterates up to and including the end-of-file
  token, and `tokenize(source)`, which returns them all as a list. Invalid
  input raises `LexicalError`.
- `minijava.parser` provides `Parser(scanner).run()` and `parse(source)`.
  Both check a whole program and return the final `END_OF_FILE` token; a
  syntax error raises `ParseError`, and scanner errors propagate as
  `LexicalError`. Both error types subclass `CompileError`.
- `minijava.cli.main(argv=None)` is the command-line entry point and
  returns the exit status.

## Supported grammar

- a main class with `public static void main(String[] id)` holding exactly
  one statement
- further classes, optionally with `extends`, holding field and method
  declarations; each method ends with `return <expression>;`
- types `int`, `int[]`, `boolean` and class names
- statements: blocks, `if`/`else` (the `else` is required), `while`,
  `System.out.println(...)`, assignment, array element assignment and
  method-call statements
- expressions with `||`, `&&`, a single comparison `<`, `>`, `==` or `!=`,
  `+ -`, `* /`, unary `!`, `.length`, method calls, indexing,
  `new int[...]`, `new Id()`, `this`, integer and boolean literals and
  parentheses
- identifiers of ASCII letters, digits and `_`
- `//` line comments and `/* ... */` block comments

## What it does not do

The package only checks programs. It builds no syntax tree, performs no
type or name checking, and generates or runs no code.