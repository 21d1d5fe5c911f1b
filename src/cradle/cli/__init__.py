"""
Cradle Command-Line Interface
=============================

- **cradlec**: translate a control-construct program to assembly mnemonics

Implemented as a Click application with built-in help and consistent
exit codes (see cradle.cli.errors).
"""

__all__ = ["cradlec"]
