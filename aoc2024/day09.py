"""A disk of file blocks, compacted block by block or file by file."""

from __future__ import annotations

from dataclasses import dataclass, field

_DIGITS = "0123456789"


@dataclass
class Block:
    """A contiguous run of disk units that belong to one file."""

    file_id: int
    start: int
    length: int

    def __post_init__(self):
        if self.length == 0:
            raise ValueError("block length is zero")

    @property
    def end(self):
        """Position of the last unit of the block."""
        return self.start + self.length - 1

    def overlaps(self, other):
        return not (self.end < other.start or self.start > other.end)

    def __str__(self):
        return f"Block[{self.file_id}, from:{self.start}, len:{self.length}]"


@dataclass
class Filesystem:
    """Blocks kept in order of their position on the disk."""

    blocks: list = field(default_factory=list)

    def pretty_print(self):
        parts = []
        last = len(self.blocks) - 1
        for i, block in enumerate(self.blocks):
            parts.append(str(block.file_id) * block.length)
            if 0 < i < last:
                parts.append("." * (self.blocks[i + 1].start - block.end - 1))
        return "".join(parts)

    def _is_free(self, start, length):
        candidate = Block(-1, start, length)
        return not any(block.overlaps(candidate) for block in self.blocks)

    def add_block(self, block):
        """Append a block; the space it takes must be free."""
        if not self._is_free(block.start, block.length):
            raise ValueError("space not free for block")
        self.blocks.append(block)

    def compress(self):
        """Fill gaps from the left with units taken from the last block."""
        gap = self.first_gap()
        while gap is not None:
            hole, index_before = gap
            last = self.blocks[-1]
            moved = min(last.length, hole.length)
            if moved < last.length:
                last.length -= moved
            else:
                self.blocks.pop()
            self.blocks.insert(index_before + 1, Block(last.file_id, hole.start, moved))
            gap = self.first_gap()

    def block_by_file_id(self, file_id):
        """Return the block with ``file_id`` and its index."""
        for index, block in enumerate(self.blocks):
            if block.file_id == file_id:
                return block, index
        raise KeyError(f"block not found: {file_id}")

    def compress_files(self):
        """Move whole files, highest id first, into the leftmost gap that fits."""
        for file_id in range(len(self.blocks) - 1, -1, -1):
            block, index = self.block_by_file_id(file_id)
            gap = self.first_gap_larger_than_until_pos(block.length, block.start)
            if gap is None:
                continue
            hole, index_before = gap
            del self.blocks[index]
            self.blocks.insert(index_before + 1, Block(block.file_id, hole.start, block.length))

    def first_gap(self):
        """Return ``(gap, index of the block before it)`` or None."""
        for index, (block, following) in enumerate(zip(self.blocks, self.blocks[1:])):
            distance = following.start - block.end - 1
            if distance > 0:
                return Block(-1, block.end + 1, distance), index
        return None

    def first_gap_larger_than_until_pos(self, min_length, pos):
        """Return the first gap of at least ``min_length`` before ``pos``, or None."""
        for index, (block, following) in enumerate(zip(self.blocks, self.blocks[1:])):
            if block.end > pos:
                break
            distance = following.start - block.end - 1
            if distance >= min_length:
                return Block(-1, block.end + 1, distance), index
        return None

    def checksum(self):
        return sum(
            block.file_id * position
            for block in self.blocks
            for position in range(block.start, block.start + block.length)
        )

    def __str__(self):
        return "[" + " ".join(str(block) for block in self.blocks) + "]"


def parse_filesystem(lines):
    """Build a filesystem from the dense disk map on the first line."""
    fs = Filesystem()
    position = 0
    for index, char in enumerate(lines[0]):
        if char not in _DIGITS or len(char) != 1:
            raise ValueError(f"Error converting character to digit: {char!r}")
        digit = int(char)
        if index % 2 == 0:
            fs.add_block(Block(index // 2, position, digit))
        position += digit
    return fs


def part1(lines):
    fs = parse_filesystem(lines)
    fs.compress()
    return fs.checksum()


def part2(lines):
    fs = parse_filesystem(lines)
    fs.compress_files()
    return fs.checksum()