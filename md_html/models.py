"""Data models for md-html."""

from dataclasses import dataclass
from enum import Enum, auto


class BlockState(Enum):
    """Block construct driving how the scanner treats the next line.

    Attributes:
        NORMAL: No multi-line construct is open.
        IN_LIST: A ``<ul>`` is open, possibly nested.
        IN_CODE_BLOCK: Inside a fenced code block.
        IN_BLOCK_QUOTE: A ``<blockquote>`` is open.
    """

    NORMAL = auto()
    IN_LIST = auto()
    IN_CODE_BLOCK = auto()
    IN_BLOCK_QUOTE = auto()


@dataclass
class ScannerContext:
    """Mutable scan state for a single conversion.

    A list can open inside a blockquote, so the flags are tracked separately;
    `state` reports the one that currently wins.

    Attributes:
        in_list: Whether a ``<ul>`` is open.
        list_depth: Nesting count of the open list; ``list_depth + 1`` ``<ul>``
            tags are open while `in_list` is True.
        in_code_block: Whether a fenced code block is open.
        in_block_quote: Whether a ``<blockquote>`` is open.
        in_inline_code: Whether a single-line ``<code>`` span is waiting for
            the next plain line.
    """

    in_list: bool = False
    list_depth: int = 0
    in_code_block: bool = False
    in_block_quote: bool = False
    in_inline_code: bool = False

    @property
    def state(self) -> BlockState:
        if self.in_code_block:
            return BlockState.IN_CODE_BLOCK
        if self.in_list:
            return BlockState.IN_LIST
        if self.in_block_quote:
            return BlockState.IN_BLOCK_QUOTE
        return BlockState.NORMAL
