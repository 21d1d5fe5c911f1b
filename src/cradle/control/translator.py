"""
One-Pass Control-Construct Translator
=====================================

This module is the heart of the package: a syntax-directed translator that
parses a block-structured mini-language and emits assembly-like mnemonics
as it goes. There is no AST; each grammar rule writes its code while it
parses.

Grammar
-------
    <program>   ::= <block> e
    <block>     ::= [ <statement> ]*
    <statement> ::= <if> | <while> | <loop> | <repeat> | <for> | <do> | <other>
    <if>        ::= i <condition> <block> [ l <block> ] e
    <while>     ::= w <condition> <block> e
    <loop>      ::= p <block> e
    <repeat>    ::= r <block> u <condition>
    <for>       ::= f <name> = <expression> <expression> <block> e
    <do>        ::= d <expression> <block> e
    <other>     ::= <name>

Every token is a single character. The characters e, l and u end a block;
they are reserved and can never be used as names.

Code Shapes
-----------
| Construct | Emitted code                                           |
|-----------|--------------------------------------------------------|
| if        | <cond> JZ L1 <then> [JMP L2 L1: <else>] L2:            |
| while     | L1: <cond> JZ L2 <body> JMP L1 L2:                     |
| loop      | L1: <body> JMP L1                                      |
| repeat    | L1: <body> <cond> JZ L1                                |
| for       | PUSH EBX ... SUB EAX, EBX JO L2 ... L1: <body> ...     |
|           |   JNZ L1 L2: POP EBX                                   |
| do        | <expr> MOV ECX, EAX L1: <body> LOOP L1                 |

The loop form (p) has no exit construct; it is an infinite loop at the
language level.

Usage
-----
>>> import io
>>> from cradle.control.source import CharacterSource
>>> from cradle.control.translator import Translator
>>> out = io.StringIO()
>>> Translator(CharacterSource.from_string("ae"), out).program()
>>> out.getvalue()
'\\tA\\n\\tEND\\n'
"""

import logging
from enum import Enum
from typing import Callable, Optional, TextIO

from cradle.control import placeholders
from cradle.control.emitter import Emitter
from cradle.control.errors import abort, expected
from cradle.control.labels import LabelAllocator
from cradle.control.source import CharacterSource


logger = logging.getLogger(__name__)


class StatementKind(Enum):
    """Statement variants, keyed by their leading character."""
    IF = "i"
    WHILE = "w"
    LOOP = "p"
    REPEAT = "r"
    FOR = "f"
    DO = "d"


# Characters that end a block (end, else, until)
BLOCK_TERMINATORS = frozenset("elu")


class Translator:
    """
    Parses a program and emits code in a single pass.

    The translator owns the lookahead (through its CharacterSource) and
    the label counter for the duration of one run.

    Attributes:
        source: Character source holding the lookahead
        emitter: Emitter writing to the output sink
        labels: Label allocator
    """

    def __init__(
        self,
        source: CharacterSource,
        sink: TextIO,
        labels: Optional[LabelAllocator] = None,
    ):
        self.source = source
        self.emitter = Emitter(sink)
        self.labels = labels or LabelAllocator()

        self._statements: dict[StatementKind, Callable[[], None]] = {
            StatementKind.IF: self._if,
            StatementKind.WHILE: self._while,
            StatementKind.LOOP: self._loop,
            StatementKind.REPEAT: self._repeat,
            StatementKind.FOR: self._for,
            StatementKind.DO: self._do,
        }

    # =========================================================================
    # Top Level
    # =========================================================================

    def program(self) -> None:
        """
        <program> ::= <block> e

        The final e is checked but not consumed, so the input may end
        right after it.

        Raises:
            TranslationError: On the first syntax error, or when blocks
                nest deeper than the interpreter's recursion limit allows
        """
        logger.debug(f"Translating {self.source.filename}")
        try:
            self.block()
        except RecursionError:
            abort("Nesting too deep", self.source.location)
        if self.source.look() != "e":
            expected("End", self.source.location)
        self.emitter.emit_line("END")
        logger.debug(
            f"Done: {self.labels.count} labels, "
            f"{self.emitter.lines_emitted} lines"
        )

    def block(self) -> None:
        """
        <block> ::= [ <statement> ]*

        Returns with the terminator (e, l or u) still in the lookahead.
        """
        while True:
            look = self.source.look()
            if look in BLOCK_TERMINATORS:
                return
            try:
                kind = StatementKind(look)
            except ValueError:
                self._other()
            else:
                self._statements[kind]()

    # =========================================================================
    # Statements
    # =========================================================================

    def _if(self) -> None:
        """<if> ::= i <condition> <block> [ l <block> ] e"""
        self.source.match("i")
        label1 = self.labels.new_label()
        label2 = label1
        logger.debug(f"if at {self.source.location}: {label1}")

        self._condition()
        self.emitter.emit_line(f"JZ {label1}")
        self.block()

        if self.source.look() == "l":
            self.source.match("l")
            label2 = self.labels.new_label()
            logger.debug(f"else at {self.source.location}: {label2}")
            self.emitter.emit_line(f"JMP {label2}")
            self.emitter.post_label(label1)
            self.block()

        self.source.match("e")
        self.emitter.post_label(label2)

    def _while(self) -> None:
        """<while> ::= w <condition> <block> e"""
        self.source.match("w")
        label1 = self.labels.new_label()
        label2 = self.labels.new_label()
        logger.debug(f"while at {self.source.location}: {label1}, {label2}")

        self.emitter.post_label(label1)
        self._condition()
        self.emitter.emit_line(f"JZ {label2}")
        self.block()
        self.source.match("e")
        self.emitter.emit_line(f"JMP {label1}")
        self.emitter.post_label(label2)

    def _loop(self) -> None:
        """<loop> ::= p <block> e"""
        self.source.match("p")
        label = self.labels.new_label()
        logger.debug(f"loop at {self.source.location}: {label}")

        self.emitter.post_label(label)
        self.block()
        self.source.match("e")
        self.emitter.emit_line(f"JMP {label}")

    def _repeat(self) -> None:
        """<repeat> ::= r <block> u <condition>"""
        self.source.match("r")
        label = self.labels.new_label()
        logger.debug(f"repeat at {self.source.location}: {label}")

        self.emitter.post_label(label)
        self.block()
        self.source.match("u")
        self._condition()
        self.emitter.emit_line(f"JZ {label}")

    def _for(self) -> None:
        """
        <for> ::= f <name> = <expression> <expression> <block> e

        EBX holds the start value while the end value is computed, so it
        is saved around the whole construct. The counter runs down from
        (end - start) to zero; JO skips the loop when the subtraction
        overflows.
        """
        self.emitter.emit_line("PUSH EBX")

        self.source.match("f")
        label1 = self.labels.new_label()
        label2 = self.labels.new_label()

        name = self.source.get_name()
        self.source.match("=")
        logger.debug(f"for {name} at {self.source.location}: {label1}, {label2}")

        self.emitter.emit_line(placeholders.load(name))
        self._expression()
        self.emitter.emit_line("MOV EBX, EAX")
        self._expression()
        self.emitter.emit_line("SUB EAX, EBX")
        self.emitter.emit_line(f"JO {label2}")
        self.emitter.emit_line(placeholders.store("EAX", name))

        self.emitter.post_label(label1)
        self.block()
        self.source.match("e")

        self.emitter.emit_line(placeholders.decrement(name))
        self.emitter.emit_line(f"JNZ {label1}")
        self.emitter.post_label(label2)
        self.emitter.emit_line("POP EBX")

    def _do(self) -> None:
        """<do> ::= d <expression> <block> e"""
        self.source.match("d")
        label = self.labels.new_label()
        logger.debug(f"do at {self.source.location}: {label}")

        self._expression()
        self.emitter.emit_line("MOV ECX, EAX")
        self.emitter.post_label(label)
        self.block()
        self.emitter.emit_line(f"LOOP {label}")
        self.source.match("e")

    def _other(self) -> None:
        """<other> ::= <name>"""
        self.emitter.emit_line(self.source.get_name())

    # =========================================================================
    # Placeholder Sub-Grammars
    # =========================================================================

    def _condition(self) -> None:
        placeholders.condition(self.emitter)

    def _expression(self) -> None:
        placeholders.expression(self.emitter)
