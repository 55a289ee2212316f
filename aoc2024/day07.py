"""Equations whose operands may be joined with +, * and concatenation."""

from __future__ import annotations

from dataclasses import dataclass


def concatenate(a, b):
    """Join the decimal digits of ``a`` and ``b``: concatenate(12, 34) is 1234."""
    if b == 0:
        return a * 10
    digits = len(str(b)) if b > 0 else 0
    return a * 10**digits + b


def _reachable(current, rest, target, operators):
    if current > target:
        return False
    head, *tail = rest
    results = [op(current, head) for op in operators]
    if not tail:
        return target in results
    return any(_reachable(value, tail, target, operators) for value in results)


_ADD_MUL = (lambda x, y: x + y, lambda x, y: x * y)
_ADD_MUL_CAT = _ADD_MUL + (concatenate,)


@dataclass(frozen=True)
class Operation:
    result: int
    operands: tuple

    def _check(self, operators):
        if len(self.operands) < 2:
            raise ValueError("an operation needs at least two operands")
        first, *rest = self.operands
        return _reachable(first, rest, self.result, operators)

    def can_be_made_true(self):
        """Tell whether + and * between the operands can give the result."""
        return self._check(_ADD_MUL)

    def can_be_made_true3(self):
        """Tell whether +, * and concatenation can give the result."""
        return self._check(_ADD_MUL_CAT)


def parse_lines(lines):
    """Parse lines of the form ``result: a b c`` into operations."""
    operations = []
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        key, sep, values_text = line.partition(":")
        if not sep:
            raise ValueError(f"invalid format on line {number}: {line}")
        result_text = key.strip()
        try:
            result = int(result_text)
        except ValueError:
            raise ValueError(f"invalid key on line {number}: {result_text}") from None
        values = []
        for text in values_text.split():
            try:
                values.append(int(text))
            except ValueError:
                raise ValueError(f"invalid value on line {number}: {text}") from None
        operations.append(Operation(result, tuple(values)))
    return operations


def part12(lines):
    """Sum results reachable with +,* and with +,*,concatenation."""
    sum1 = 0
    sum2 = 0
    for operation in parse_lines(lines):
        if operation.can_be_made_true():
            sum1 += operation.result
            sum2 += operation.result
        elif operation.can_be_made_true3():
            sum2 += operation.result
    return sum1, sum2