"""A character stack and bracket sequence validation."""

from __future__ import annotations

from collections.abc import Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


class Stack:
    """A last-in, first-out stack of characters."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, item: str) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> str:
        """Remove and return the top item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("стек пуст")
        return self._items.pop()

    def peek(self) -> str:
        """Return the top item without removing it; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("стек пуст")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()


def is_valid(s: str) -> bool:
    """Return True if every (), [] and {} bracket in ``s`` is properly matched."""
    stack = Stack()
    for char in s:
        if char in _OPENING:
            stack.push(char)
        elif char in _PAIRS:
            if stack.is_empty() or stack.pop() != _PAIRS[char]:
                return False
    return stack.is_empty()


def is_valid_only_parentheses(s: str) -> bool:
    """Return True if the round parentheses in ``s`` are balanced."""
    stack = Stack()
    for char in s:
        if char == "(":
            stack.push(char)
        elif char == ")":
            if stack.is_empty():
                return False
            stack.pop()
    return stack.is_empty()


_CASES = [
    ("()[]{}", True),
    ("([)]", False),
    ("{[]}", True),
    ("(", False),
    (")", False),
    ("", True),
]

_PAREN_CASES = [
    ("()", True),
    ("(", False),
    (")", False),
    ("", True),
    ("(())", True),
]


def _report(cases, check) -> None:
    for expression, expected in cases:
        result = check(expression)
        status = "ok" if result == expected else "ne ok"
        print(f"{status} {expression} → {result} (ожидалось: {expected})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the bracket checks on the sample cases and demonstrate the stack."""
    _report(_CASES, is_valid)

    print("\n=== Проверка только круглых скобок ===")
    _report(_PAREN_CASES, is_valid_only_parentheses)

    stack = Stack()
    for item in "ABC":
        stack.push(item)

    print(f"Верхний элемент (без удаления): {stack.peek()}")

    print("\nИзвлекаем элементы:")
    while not stack.is_empty():
        print(f"Извлечен: {stack.pop()}")

    print(f"\nСтек пуст: {stack.is_empty()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())