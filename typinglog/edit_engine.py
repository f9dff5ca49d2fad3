"""
Minimal edit scripts between two strings.

The script is computed from a Levenshtein cost matrix (numpy) followed by a
deterministic backtrace, so the same pair of strings always yields the same
operations. Operations are ordered front to back and each position refers to
the buffer as it looks after all preceding operations were applied.

Backtrace preferences where characters differ: insertion, then deletion,
then substitution. Equal characters always take the diagonal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List, Tuple

import numpy as np


@dataclass(frozen=True)
class EditOperation(ABC):
    """
    Single-character edit at a buffer position.

    Attributes:
        pos: Position in the buffer at the time the operation is applied
        char: Character inserted, deleted or written
    """
    pos: int
    char: str

    # Wire marker for this kind of operation (single point of truth)
    marker: ClassVar[str] = ""

    @abstractmethod
    def apply(self, text: str) -> str:
        """Return text with this operation applied."""

    def shifted(self, offset: int) -> "EditOperation":
        """Same operation moved right by offset positions."""
        return type(self)(self.pos + offset, self.char)

    def _check_pos(self, text: str, limit: int):
        if not (0 <= self.pos <= limit):
            raise ValueError(f"{self} out of range for buffer of length {len(text)}")

    def __str__(self) -> str:
        return f"{self.pos}{self.marker}{self.char}"


@dataclass(frozen=True)
class Insertion(EditOperation):
    marker: ClassVar[str] = "+"

    def apply(self, text: str) -> str:
        self._check_pos(text, len(text))
        return text[:self.pos] + self.char + text[self.pos:]


@dataclass(frozen=True)
class Deletion(EditOperation):
    marker: ClassVar[str] = "-"

    def apply(self, text: str) -> str:
        self._check_pos(text, len(text) - 1)
        return text[:self.pos] + text[self.pos + 1:]


@dataclass(frozen=True)
class Substitution(EditOperation):
    marker: ClassVar[str] = "$"

    def apply(self, text: str) -> str:
        self._check_pos(text, len(text) - 1)
        return text[:self.pos] + self.char + text[self.pos + 1:]


# Marker -> operation class lookup (single point of truth)
OPERATIONS_BY_MARKER = {cls.marker: cls for cls in (Insertion, Deletion, Substitution)}


@dataclass(frozen=True)
class EditSequence:
    """Ordered, immutable list of edit operations."""
    ops: Tuple[EditOperation, ...] = field(default_factory=tuple)

    def apply(self, text: str) -> str:
        for op in self.ops:
            text = op.apply(text)
        return text

    def shift(self, offset: int) -> "EditSequence":
        if offset == 0:
            return self
        return EditSequence(tuple(op.shifted(offset) for op in self.ops))

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[EditOperation]:
        return iter(self.ops)

    def __getitem__(self, index):
        return self.ops[index]

    def __str__(self) -> str:
        return "".join(str(op) for op in self.ops)


def _strip_common(a: str, b: str) -> Tuple[int, int]:
    """Return (prefix, suffix) lengths shared by a and b, non-overlapping."""
    limit = min(len(a), len(b))
    prefix = 0
    while prefix < limit and a[prefix] == b[prefix]:
        prefix += 1
    suffix = 0
    while suffix < limit - prefix and a[-1 - suffix] == b[-1 - suffix]:
        suffix += 1
    return prefix, suffix


def _code_points(text: str) -> np.ndarray:
    return np.fromiter((ord(c) for c in text), dtype=np.int64, count=len(text))


def _next_row(prev: np.ndarray, i: int, char: int, target: np.ndarray,
              allow_substitution: bool, big: int) -> np.ndarray:
    """
    Compute cost row i from row i-1.

    Deletion and diagonal candidates are vectorized; the insertion chain
    along the row is a running minimum of (candidate - j) shifted back by j.
    """
    equal = target == char
    if allow_substitution:
        diagonal = prev[:-1] + np.where(equal, 0, 1)
    else:
        diagonal = np.where(equal, prev[:-1], big)
    candidate = np.empty_like(prev)
    candidate[0] = i
    candidate[1:] = np.minimum(diagonal, prev[1:] + 1)
    offsets = np.arange(len(prev), dtype=prev.dtype)
    return np.minimum.accumulate(candidate - offsets) + offsets


def _cost_matrix(a: str, b: str, allow_substitution: bool) -> np.ndarray:
    n, m = len(a), len(b)
    big = n + m + 1
    target = _code_points(b)
    matrix = np.empty((n + 1, m + 1), dtype=np.int64)
    matrix[0] = np.arange(m + 1)
    for i, char in enumerate(_code_points(a), start=1):
        matrix[i] = _next_row(matrix[i - 1], i, char, target, allow_substitution, big)
    return matrix


def _backtrace(a: str, b: str, matrix: np.ndarray, allow_substitution: bool) -> List[EditOperation]:
    ops: List[EditOperation] = []
    i, j = len(a), len(b)
    while i > 0 or j > 0:
        if i == 0:
            ops.append(Insertion(j - 1, b[j - 1]))
            j -= 1
            continue
        if j == 0:
            ops.append(Deletion(0, a[i - 1]))
            i -= 1
            continue
        if a[i - 1] == b[j - 1]:
            i -= 1
            j -= 1
            continue

        insert_cost = matrix[i, j - 1]
        delete_cost = matrix[i - 1, j]
        if allow_substitution:
            substitute_cost = matrix[i - 1, j - 1]
        else:
            substitute_cost = insert_cost + delete_cost + 1

        if insert_cost <= delete_cost and insert_cost <= substitute_cost:
            ops.append(Insertion(j - 1, b[j - 1]))
            j -= 1
        elif delete_cost <= substitute_cost:
            ops.append(Deletion(j, a[i - 1]))
            i -= 1
        else:
            ops.append(Substitution(j - 1, b[j - 1]))
            i -= 1
            j -= 1
    ops.reverse()
    return ops


def edit_sequence(a: str, b: str, allow_substitution: bool = True) -> EditSequence:
    """
    Compute the minimal ordered edit script transforming a into b.

    Args:
        a: Source string
        b: Target string
        allow_substitution: When False only insertions and deletions are used

    Returns:
        EditSequence whose apply(a) == b
    """
    if a == b:
        return EditSequence()

    prefix, suffix = _strip_common(a, b)
    core_a = a[prefix:len(a) - suffix]
    core_b = b[prefix:len(b) - suffix]

    matrix = _cost_matrix(core_a, core_b, allow_substitution)
    ops = _backtrace(core_a, core_b, matrix, allow_substitution)
    return EditSequence(tuple(ops)).shift(prefix)


def edit_distance(a: str, b: str, allow_substitution: bool = True) -> int:
    """Edit distance between a and b without building the script."""
    if a == b:
        return 0

    prefix, suffix = _strip_common(a, b)
    core_a = a[prefix:len(a) - suffix]
    core_b = b[prefix:len(b) - suffix]
    if not core_a or not core_b:
        return len(core_a) + len(core_b)

    big = len(core_a) + len(core_b) + 1
    target = _code_points(core_b)
    row = np.arange(len(core_b) + 1, dtype=np.int64)
    for i, char in enumerate(_code_points(core_a), start=1):
        row = _next_row(row, i, char, target, allow_substitution, big)
    return int(row[-1])
