"""
Tokenizer - Split text into lines for alignment
"""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """
    Split text on line feeds.

    Carriage returns stay part of the line content. A single trailing newline
    does not produce an extra blank line, so "a\\n" and "a" both yield ["a"]
    and the empty string yields no lines at all.
    """
    lines = text.split("\n")
    # Remove last empty line from split if the text ends with newline
    if lines[-1] == "":
        lines.pop()
    return lines
