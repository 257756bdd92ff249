import pytest

from labkit.brackets import Stack, is_valid, is_valid_only_parentheses, main


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("()[]{}", True),
        ("([)]", False),
        ("{[]}", True),
        ("(", False),
        (")", False),
        ("", True),
    ],
)
def test_is_valid(expression, expected):
    assert is_valid(expression) is expected


def test_is_valid_ignores_other_characters():
    assert is_valid("a(b[c]{d}e)f") is True
    assert is_valid("x(y]z") is False


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("()", True),
        ("(", False),
        (")", False),
        ("", True),
        ("(())", True),
    ],
)
def test_is_valid_only_parentheses(expression, expected):
    assert is_valid_only_parentheses(expression) is expected


def test_only_parentheses_ignores_other_brackets():
    assert is_valid_only_parentheses("([)]") is True


def test_stack_lifo_order():
    stack = Stack()
    for item in "ABC":
        stack.push(item)
    assert len(stack) == 3
    assert stack.peek() == "C"
    assert len(stack) == 3
    assert [stack.pop() for _ in range(3)] == ["C", "B", "A"]
    assert stack.is_empty() is True


def test_stack_empty_pop_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_stack_empty_peek_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_stack_clear():
    stack = Stack()
    stack.push("x")
    stack.push("y")
    stack.clear()
    assert len(stack) == 0
    assert stack.is_empty() is True


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "ne ok" not in out
    assert "Верхний элемент (без удаления): C" in out
    assert out.index("Извлечен: C") < out.index("Извлечен: B") < out.index("Извлечен: A")
    assert "Стек пуст: True" in out