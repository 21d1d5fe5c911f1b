"""
Placeholder Productions
=======================

Stand-ins for the parts of a real compiler this translator leaves out.

- condition / expression: grammar rules that emit a fixed marker line
  and consume no input. A real relational/arithmetic grammar would plug
  in here.
- load / store / decrement: variable-storage instructions with no
  resolved address. They name the variable but say nothing about where
  it lives.
"""

from cradle.control.emitter import Emitter


CONDITION = "<condition>"
EXPRESSION = "<expression>"


def condition(emitter: Emitter) -> None:
    """<condition> placeholder: emits a marker, reads nothing."""
    emitter.emit_line(CONDITION)


def expression(emitter: Emitter) -> None:
    """<expression> placeholder: leaves a value in EAX, reads nothing."""
    emitter.emit_line(EXPRESSION)


def load(name: str) -> str:
    return f"<somehow load {name}>"


def store(register: str, name: str) -> str:
    return f"<somehow store {register} to {name}>"


def decrement(name: str) -> str:
    return f"<somehow SUB {name}, 1>"
