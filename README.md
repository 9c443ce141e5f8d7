# infixcalc

A small integer expression calculator. It converts infix expressions to
postfix form and evaluates them.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Using the command

    infixcalc

The command reads standard input and treats each whitespace-separated word
as one expression, so an expression must have no spaces between its tokens.
It stops at the word `QUIT` or at the end of input. `infixcalc --help` shows
a short usage message.

For each expression it prints the postfix form, then the value, then an
empty line:

    $ echo "1+2*3 (1+2)*3 QUIT" | infixcalc
    1 2 3 * +
    7

    1 2 + 3 *
    9

When a `/` or `%` has a zero right operand, or `0` is raised to a negative
power, the line `Division by zero error!` is printed in place of the value.
An expression with unbalanced parentheses, or one that leaves an operator
without its operands, is reported on standard error as `error: ...` and the
command goes on with the next word.

## Supported operators

Operands are non-negative integer literals; there are no unary minus or
variables. Arithmetic is on Python integers, and division and remainder
truncate toward zero.

| Priority (high to low) | Operators            | Associativity |
|------------------------|----------------------|---------------|
| 1                      | `!` (logical not)    | right         |
| 2                      | `^`                  | right         |
| 3                      | `*` `/` `%`          | left          |
| 4                      | `+` `-`              | left          |
| 5                      | `<` `>` `<=` `>=`    | left          |
| 6                      | `==` `!=`            | left          |
| 7                      | `&&`                 | left          |
| 8                      | `\|\|`               | left          |

Parentheses group sub-expressions. Comparisons and logical operators give
`1` for true and `0` for false. A power with a negative exponent gives `1`.

## Using the library

```python
from infixcalc.infix import convert_to_postfix, tokenize
from infixcalc.postfix import evaluate_postfix, DivisionByZeroError

print(list(tokenize("10<=2&&!0")))  # ['10', '<=', '2', '&&', '!', '0']

postfix = convert_to_postfix("(1+2)*3")
print(postfix)                    # 1 2 + 3 *
print(evaluate_postfix(postfix))  # 9

try:
    evaluate_postfix(convert_to_postfix("4/0"))
except DivisionByZeroError as exc:
    print(exc)                    # Division by zero error!
```

- `infixcalc.infix` — `tokenize`, `convert_to_postfix` (raises `ValueError`
  on unbalanced parentheses), and the helpers `has_left_associative` and
  `has_higher_priority`. `tokenize` skips whitespace, so the library accepts
  spaced expressions even though the command does not.
- `infixcalc.postfix` — `evaluate_postfix` for space-separated postfix
  strings (raises `DivisionByZeroError`, a subclass of `ZeroDivisionError`,
  and `ValueError` when an operand is missing), plus `evaluate`,
  `evaluate_unary`, `power`, `to_num` and `is_num`.
- `infixcalc.structures` — the `BoundedStack` and `CircularQueue`
  containers used by the conversion and evaluation steps. Pushing onto a
  full container raises `OverflowError`; taking from an empty one raises
  `IndexError`.

## Limits

The converter keeps at most 509 characters of postfix output; anything
beyond that is dropped. The evaluator's operand stack holds at most 255
values. There are no floating-point numbers, variables or functions.