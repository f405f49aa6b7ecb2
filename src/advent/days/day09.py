"""Day 9: Disk Fragmenter — compact a disk map and checksum it.

The dense map alternates file and free-space lengths.  A file with id
``f`` occupying ``size`` blocks from ``start`` contributes
``f * (start + start+1 + ... + start+size-1)`` to the checksum.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field

from advent.util.parsing import ParseError

TITLE = "Disk Fragmenter"


@dataclass(frozen=True)
class Block:
    start: int
    size: int
    file_id: int | None = None
    """``None`` for free space."""

    @property
    def stop(self) -> int:
        return self.start + self.size

    def checksum(self) -> int:
        if self.file_id is None:
            return 0
        return self.file_id * (self.start * self.size + self.size * (self.size - 1) // 2)


@dataclass
class Disk:
    files: list[Block] = field(default_factory=list)
    gaps: list[Block] = field(default_factory=list)

    @property
    def length(self) -> int:
        return max((b.stop for b in self.files + self.gaps), default=0)


def parse_input(text: str) -> Disk:
    digits = text.strip()
    if not digits.isdigit():
        raise ParseError("the disk map is a single line of digits")
    disk = Disk()
    start = 0
    for i, char in enumerate(digits):
        size = int(char)
        if size:
            if i % 2 == 0:
                disk.files.append(Block(start, size, i // 2))
            else:
                disk.gaps.append(Block(start, size))
        start += size
    return disk


def checksum(files: list[Block]) -> int:
    return sum(block.checksum() for block in files)


def part_1(disk: Disk) -> int:
    """Move single blocks from the end into the leftmost free blocks."""
    layout: list[int | None] = [None] * disk.length
    for block in disk.files:
        layout[block.start:block.stop] = [block.file_id] * block.size
    left, right = 0, len(layout) - 1
    while True:
        while left < right and layout[left] is not None:
            left += 1
        while left < right and layout[right] is None:
            right -= 1
        if left >= right:
            break
        layout[left], layout[right] = layout[right], None
    return sum(position * file_id for position, file_id in enumerate(layout) if file_id)


def part_2(disk: Disk) -> int:
    """Move whole files, highest id first, into the leftmost gap that fits.

    Free space is kept in one min-heap of gap starts per gap size, so the
    leftmost fitting gap is the smallest start among the heaps for sizes
    at least the file's size.
    """
    by_size: dict[int, list[int]] = {size: [] for size in range(1, 10)}
    for gap in disk.gaps:
        heapq.heappush(by_size.setdefault(gap.size, []), gap.start)

    moved: list[Block] = []
    for block in sorted(disk.files, key=lambda b: b.file_id, reverse=True):
        best_size, best_start = 0, block.start
        for size, starts in by_size.items():
            if size >= block.size and starts and starts[0] < best_start:
                best_size, best_start = size, starts[0]
        if not best_size:
            moved.append(block)
            continue
        heapq.heappop(by_size[best_size])
        moved.append(Block(best_start, block.size, block.file_id))
        remaining = best_size - block.size
        if remaining:
            heapq.heappush(by_size.setdefault(remaining, []), best_start + block.size)
    return checksum(moved)
