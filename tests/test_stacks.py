import pytest

from dskit.stacks import (
    ArrayStack,
    LinkedStack,
    QueueBackedStack,
    StackBackedQueue,
    brackets_balanced,
    is_mirrored,
    is_palindrome,
    is_valid_pop_sequence,
    odd_before_even,
    to_base,
)


def test_array_stack_is_lifo():
    stack = ArrayStack()
    for value in [1, 2, 3, 4]:
        stack.push(value)
    assert len(stack) == 4
    assert stack.peek() == 4
    assert [stack.pop() for _ in range(4)] == [4, 3, 2, 1]
    assert len(stack) == 0


def test_array_stack_overflow_and_underflow():
    stack = ArrayStack(capacity=2)
    stack.push("a")
    stack.push("b")
    with pytest.raises(OverflowError):
        stack.push("c")
    stack.pop()
    stack.pop()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_array_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(capacity=0)


def test_linked_stack_iterates_top_to_bottom():
    stack = LinkedStack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert stack.peek() == 3
    assert len(stack) == 3


def test_linked_stack_reverse():
    stack = LinkedStack()
    for value in [5, 6, 7, 8]:
        stack.push(value)
    before = list(stack)
    stack.reverse()
    assert list(stack) == before[::-1]
    assert stack.pop() == 5
    assert len(stack) == 3


def test_linked_stack_empty_errors():
    stack = LinkedStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_queue_backed_stack_matches_source_demo():
    stack = QueueBackedStack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.is_empty() is False
    stack.push(4)
    stack.push(5)
    assert stack.pop() == 5
    assert stack.pop() == 4
    assert stack.pop() == 1
    assert stack.is_empty() is True
    with pytest.raises(IndexError):
        stack.pop()


def test_stack_backed_queue_matches_source_demo():
    queue = StackBackedQueue()
    for value in [1, 2, 3]:
        queue.push(value)
    assert queue.pop() == 1
    assert queue.pop() == 2
    assert queue.peek() == 3
    queue.pop()
    assert queue.is_empty() is True


def test_stack_backed_queue_keeps_order_with_interleaving():
    queue = StackBackedQueue()
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    queue.push(3)
    queue.push(4)
    assert [queue.pop() for _ in range(3)] == [2, 3, 4]
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("([]{})", True),
        ("a(b[c]d)e", True),
        ("", True),
        ("(]", False),
        (")", False),
        ("((", False),
        ("{[}]", False),
    ],
)
def test_brackets_balanced(text, expected):
    assert brackets_balanced(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("abcba", True), ("abba", True), ("", True), ("abca", False)],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


def test_pop_sequence_classic_cases():
    assert is_valid_pop_sequence([1, 2, 3, 4, 5], [4, 5, 3, 2, 1]) is True
    assert is_valid_pop_sequence([1, 2, 3, 4, 5], [4, 3, 5, 1, 2]) is False


def test_pop_sequence_identity_and_reverse_are_valid():
    pushed = list("abcdef")
    assert is_valid_pop_sequence(pushed, pushed) is True
    assert is_valid_pop_sequence(pushed, pushed[::-1]) is True


def test_pop_sequence_length_mismatch():
    assert is_valid_pop_sequence([1, 2, 3], [1, 2]) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc@cba", True),
        ("@", True),
        ("abc@abc", False),
        ("ab@b", False),
        ("a@b@a", False),
        ("abc", False),
        ("", False),
    ],
)
def test_is_mirrored(text, expected):
    assert is_mirrored(text) is expected


@pytest.mark.parametrize("number", [1, 7, 10, 255, 1000, 123456])
@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_to_base_round_trip(number, base):
    assert int(to_base(number, base), base) == number


def test_to_base_uses_lowercase_digits():
    assert to_base(255, 16) == "ff"
    assert to_base(0, 2) == "0"


def test_to_base_errors():
    with pytest.raises(ValueError):
        to_base(10, 1)
    with pytest.raises(ValueError):
        to_base(10, 17)
    with pytest.raises(ValueError):
        to_base(-3, 10)


def test_odd_before_even_invariants():
    cars = [4, 1, 6, 3, 2, 5]
    operations, leaving = odd_before_even(cars)
    odds = [car for car in leaving if car % 2]
    assert sorted(leaving) == sorted(cars)
    assert leaving[: len(odds)] == odds
    assert all(car % 2 == 0 for car in leaving[len(odds):])
    assert odds == [car for car in cars if car % 2]
    assert operations.count("PUSH") == len(cars)
    assert operations.count("POP") == len(cars)
    assert len(operations) == 2 * len(cars)


def test_odd_before_even_operation_prefix_is_valid():
    operations, _ = odd_before_even([2, 3, 4, 7])
    depth = 0
    for operation in operations:
        depth += 1 if operation == "PUSH" else -1
        assert depth >= 0
    assert depth == 0