"""A three-bit computer: running programs and finding a self-printing input."""

from __future__ import annotations

import re
from dataclasses import dataclass

from aoc2024.common import string_to_int

_REGISTER_A_RE = re.compile(r"Register A: (\d+)")
_REGISTER_B_RE = re.compile(r"Register B: (\d+)")
_REGISTER_C_RE = re.compile(r"Register C: (\d+)")
_PROGRAM_RE = re.compile(r"Program: (.*)")


def _shift_div(value, power):
    """Divide by 2**power, truncating toward zero."""
    quotient = abs(value) >> power
    return quotient if value >= 0 else -quotient


def _mod8(value):
    """Remainder by 8 carrying the sign of ``value``."""
    remainder = abs(value) % 8
    return remainder if value >= 0 else -remainder


@dataclass
class Computer:
    """The three registers of the machine."""

    a: int = 0
    b: int = 0
    c: int = 0

    def _combo(self, operand):
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"wrong combo operand {operand}")

    def run(self, program):
        """Run ``program`` until the pointer leaves it; return the output values."""
        output = []
        ip = 0
        while 0 <= ip < len(program):
            opcode = program[ip]
            if opcode == 0:
                self.a = _shift_div(self.a, self._combo(program[ip + 1]))
            elif opcode == 1:
                self.b ^= program[ip + 1]
            elif opcode == 2:
                self.b = _mod8(self._combo(program[ip + 1]))
            elif opcode == 3:
                if self.a != 0:
                    ip = program[ip + 1]
                    continue
            elif opcode == 4:
                self.b ^= self.c
            elif opcode == 5:
                output.append(_mod8(self._combo(program[ip + 1])))
            elif opcode == 6:
                self.b = _shift_div(self.a, self._combo(program[ip + 1]))
            elif opcode == 7:
                self.c = _shift_div(self.a, self._combo(program[ip + 1]))
            else:
                raise ValueError(f"wrong opcode {opcode} at ip {ip}")
            ip += 2
        return output


def _first_output(a):
    """First value printed by the puzzle's program for register A = ``a``."""
    b = (a % 8) ^ 5
    c = a >> b
    b ^= 6
    b ^= c
    return b % 8


def solve(min_a, max_a, target_out):
    """Values of A in ``min_a..max_a`` whose first output is ``target_out``."""
    return [a for a in range(min_a, max_a + 1) if _first_output(a) == target_out]


def _search(program, step, remaining_a):
    base = remaining_a * 8
    for candidate in solve(base, base + 7, program[step]):
        if step == 0:
            return candidate
        found = _search(program, step - 1, candidate)
        if found is not None:
            return found
    return None


def parse_input(lines):
    """Return registers A, B, C and the program from the puzzle lines."""
    def grab(pattern, line):
        match = pattern.search(line)
        if match is None:
            raise ValueError(f"unexpected line: {line!r}")
        return match.group(1)

    a = string_to_int(grab(_REGISTER_A_RE, lines[0]))
    b = string_to_int(grab(_REGISTER_B_RE, lines[1]))
    c = string_to_int(grab(_REGISTER_C_RE, lines[2]))
    program = [string_to_int(token) for token in grab(_PROGRAM_RE, lines[4]).split(",")]
    return a, b, c, program


def part1(lines):
    """Run the program and return its output joined by commas."""
    a, b, c, program = parse_input(lines)
    output = Computer(a, b, c).run(program)
    if not output:
        raise ValueError("the program printed nothing")
    return ",".join(str(value) for value in output)


def part2(lines):
    """Smallest-first search for the A value that makes the program print itself."""
    program = parse_input(lines)[3]
    found = _search(program, len(program) - 1, 0)
    if found is None:
        raise ValueError("no value of register A reproduces the program")
    return found