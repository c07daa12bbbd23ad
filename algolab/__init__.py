"""Classic algorithms and small exercises: sorting, searching, stacks, number
theory, arithmetic, puzzles, shapes, lines, dates, matrices, text patterns,
binary trees and a rock, paper, scissors game."""

__version__ = "0.1.0"