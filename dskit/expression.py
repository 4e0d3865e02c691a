"""Infix to postfix conversion, postfix evaluation and expression trees.

Postfix strings follow one convention throughout: every number is written
as its decimal digits followed by ``#``, and operators stand alone, so
``12+3`` becomes ``12#3#+``. Arithmetic is on integers, and division
truncates toward zero.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def to_postfix(expression: str) -> str:
    """Convert an infix expression of non-negative integers to postfix.

    Spaces are ignored and an ``=`` ends the expression.
    """
    output: list[str] = []
    operators: list[str] = []
    i = 0
    length = len(expression)
    while i < length:
        char = expression[i]
        if char == " ":
            i += 1
            continue
        if char == "=":
            break
        if _is_digit(char):
            end = i
            while end < length and _is_digit(expression[end]):
                end += 1
            output.append(expression[i:end] + "#")
            i = end
            continue
        if char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ValueError("unmatched ')' in expression")
            operators.pop()
        elif char in _PRECEDENCE:
            while (
                operators
                and operators[-1] != "("
                and _PRECEDENCE[operators[-1]] >= _PRECEDENCE[char]
            ):
                output.append(operators.pop())
            operators.append(char)
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
        i += 1
    while operators:
        operator = operators.pop()
        if operator == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(operator)
    return "".join(output)


def _tokens(postfix: str) -> Iterator[str]:
    """Yield the numbers (as digit strings) and operators of a postfix string."""
    i = 0
    length = len(postfix)
    while i < length:
        char = postfix[i]
        if char in _PRECEDENCE:
            yield char
            i += 1
        elif _is_digit(char):
            end = i
            while end < length and _is_digit(postfix[end]):
                end += 1
            yield postfix[i:end]
            if end < length:
                if postfix[end] != "#":
                    raise ValueError(f"number not terminated by '#' at {end}")
                end += 1
            i = end
        else:
            raise ValueError(f"unexpected character {char!r} in postfix")


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix string with integer arithmetic."""
    stack: list[int] = []
    for token in _tokens(postfix):
        if token in _PRECEDENCE:
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(token, left, right))
        else:
            stack.append(int(token))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def evaluate(expression: str) -> int:
    """Evaluate an infix expression with integer arithmetic."""
    return evaluate_postfix(to_postfix(expression))


@dataclass
class ExprNode:
    """A node of an expression tree: an operator with two children, or a number."""

    data: str
    left: ExprNode | None = None
    right: ExprNode | None = None

    @property
    def _label(self) -> str:
        return self.data + "#" if _is_digit(self.data[0]) else self.data

    def preorder(self) -> str:
        """Return the prefix form, numbers followed by ``#``."""
        parts = [self._label]
        if self.left is not None:
            parts.append(self.left.preorder())
        if self.right is not None:
            parts.append(self.right.preorder())
        return "".join(parts)

    def inorder(self) -> str:
        """Return the unparenthesized infix form, numbers followed by ``#``."""
        parts = []
        if self.left is not None:
            parts.append(self.left.inorder())
        parts.append(self._label)
        if self.right is not None:
            parts.append(self.right.inorder())
        return "".join(parts)

    def postorder(self) -> str:
        """Return the postfix form, numbers followed by ``#``."""
        parts = []
        if self.left is not None:
            parts.append(self.left.postorder())
        if self.right is not None:
            parts.append(self.right.postorder())
        parts.append(self._label)
        return "".join(parts)

    def level_order(self) -> str:
        """Return the labels level by level, left to right."""
        parts: list[str] = []
        queue: deque[ExprNode] = deque([self])
        while queue:
            node = queue.popleft()
            parts.append(node._label)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return "".join(parts)

    def evaluate(self) -> int:
        """Compute the value of the subtree rooted here."""
        if self.data in _PRECEDENCE:
            if self.left is None or self.right is None:
                raise ValueError(f"operator {self.data!r} lacks operands")
            return _apply(self.data, self.left.evaluate(), self.right.evaluate())
        return int(self.data)


def build_expression_tree(postfix: str) -> ExprNode:
    """Build an expression tree from a postfix string."""
    stack: list[ExprNode] = []
    for token in _tokens(postfix):
        if token in _PRECEDENCE:
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(ExprNode(token, left, right))
        else:
            stack.append(ExprNode(token))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]