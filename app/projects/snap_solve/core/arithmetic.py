"""
Arithmetic engine for Snap & Solve.
Tokenizes an expression, parses it into a tree with recursive descent, and evaluates the tree.

Grammar:
    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := ("+" | "-") unary | primary
    primary    := NUMBER | "(" expression ")"
"""
import math
import re
from dataclasses import dataclass
from decimal import Decimal

NUMBER_RE = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")


class ExpressionSyntaxError(ValueError):
    """Raised when text is not a well-formed arithmetic expression."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at position {position}")
        self.position = position


@dataclass(frozen=True)
class Token:
    kind: str  # "number", "op", "lparen", "rparen", "end"
    text: str
    position: int


@dataclass(frozen=True)
class Number:
    value: float

    def evaluate(self) -> float:
        return self.value


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: object

    def evaluate(self) -> float:
        value = self.operand.evaluate()
        return -value if self.op == "-" else value


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: object
    right: object

    def evaluate(self) -> float:
        left = self.left.evaluate()
        right = self.right.evaluate()
        if self.op == "+":
            return left + right
        if self.op == "-":
            return left - right
        if self.op == "*":
            return left * right
        # ZeroDivisionError propagates to the caller
        return left / right


def tokenize(text: str) -> list[Token]:
    """Split text into tokens. Whitespace is skipped; a trailing "end" token is always added."""
    tokens = []
    i = 0
    while i < len(text):
        c = text[i]
        if c.isspace():
            i += 1
            continue
        if c in "+-*/":
            tokens.append(Token("op", c, i))
            i += 1
            continue
        if c == "(":
            tokens.append(Token("lparen", c, i))
            i += 1
            continue
        if c == ")":
            tokens.append(Token("rparen", c, i))
            i += 1
            continue
        m = NUMBER_RE.match(text, i)
        if m is None:
            raise ExpressionSyntaxError(f"Unexpected character {c!r}", i)
        tokens.append(Token("number", m.group(), i))
        i = m.end()
    tokens.append(Token("end", "", len(text)))
    return tokens


class _Parser:
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def parse(self):
        if self.peek().kind == "end":
            raise ExpressionSyntaxError("Empty expression", 0)
        node = self.expression()
        token = self.peek()
        if token.kind != "end":
            raise ExpressionSyntaxError(f"Unexpected {token.text!r}", token.position)
        return node

    def expression(self):
        node = self.term()
        while self.peek().kind == "op" and self.peek().text in "+-":
            op = self.advance().text
            node = BinaryOp(op, node, self.term())
        return node

    def term(self):
        node = self.unary()
        while self.peek().kind == "op" and self.peek().text in "*/":
            op = self.advance().text
            node = BinaryOp(op, node, self.unary())
        return node

    def unary(self):
        token = self.peek()
        if token.kind == "op" and token.text in "+-":
            self.advance()
            return UnaryOp(token.text, self.unary())
        return self.primary()

    def primary(self):
        token = self.advance()
        if token.kind == "number":
            return Number(float(token.text))
        if token.kind == "lparen":
            node = self.expression()
            closing = self.advance()
            if closing.kind != "rparen":
                raise ExpressionSyntaxError("Expected ')'", closing.position)
            return node
        if token.kind == "end":
            raise ExpressionSyntaxError("Unexpected end of expression", token.position)
        raise ExpressionSyntaxError(f"Unexpected {token.text!r}", token.position)


def parse(text: str):
    """Parse text into an expression tree. Raises ExpressionSyntaxError."""
    return _Parser(tokenize(text)).parse()


def evaluate_expression(text: str) -> float:
    """Parse and evaluate text. May raise ExpressionSyntaxError or ZeroDivisionError."""
    return parse(text).evaluate()


def format_number(value: float) -> str:
    """
    Render a float the way a JavaScript number prints:
    14.0 -> "14", 0.1 + 0.2 -> "0.30000000000000004", 1e21 -> "1e+21", 1e-7 -> "1e-7".
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")
    if value == 0:
        return "0"
    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        # Shortest round-trip digits, written out without an exponent
        text = format(Decimal(text), "f")
        return text.rstrip("0").rstrip(".") if "." in text else text
    mantissa, _, exponent = text.partition("e")
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"
