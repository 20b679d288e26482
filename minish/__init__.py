"""A small shell: tokenizing, variable expansion, command tables, echo and pwd."""

__version__ = "0.1.0"

__all__ = ["builtins", "command_table", "expander", "shell", "tokens"]