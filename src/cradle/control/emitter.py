"""
Instruction Emitter
===================

Writes mnemonic text to an output sink. Every write goes straight to the
sink; nothing is buffered, reordered or rewound, so output produced before
a translation error stays visible.

Output Format
-------------
| Call              | Bytes written           |
|-------------------|-------------------------|
| emit(text)        | TAB text                |
| emit_line(text)   | TAB text NEWLINE        |
| post_label(label) | TAB label ":"           |

Label definitions use emit(), not emit_line(), so they do not end the
current output line: whatever is emitted next lands on the same line.

    iaee  ->      <condition>
                  JZ L0
                  A
                  L0:     END
"""

from typing import TextIO


class Emitter:
    """
    Writes instruction text to a sink.

    Attributes:
        sink: Writable text stream receiving the output
    """

    def __init__(self, sink: TextIO):
        self.sink = sink
        self._lines = 0
        self._labels = 0

    def emit(self, text: str) -> None:
        """Output a string with a leading tab."""
        self.sink.write(f"\t{text}")

    def emit_line(self, text: str) -> None:
        """Output a string with a leading tab and a trailing newline."""
        self.sink.write(f"\t{text}\n")
        self._lines += 1

    def post_label(self, label: str) -> None:
        """Output a label definition (no trailing newline)."""
        self.emit(f"{label}:")
        self._labels += 1

    @property
    def lines_emitted(self) -> int:
        """Number of complete lines written with emit_line()."""
        return self._lines

    @property
    def labels_posted(self) -> int:
        """Number of label definitions written."""
        return self._labels
