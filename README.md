# sinusplot

A small stack-based evaluator for arithmetic expressions. It computes the
values needed to plot a function of `x`: fill in a value for `x`, then
evaluate the expression text.

## Expression syntax

- numbers: `3`, `2.5`
- binary operators: `+`, `-`, `*`, `/`, `^` (power)
- a leading minus, at the start or right after `(`: `-3`, `(-2)`
- functions, always followed by a parenthesised argument:
  `sin(...)`, `cos(...)`, `tg(...)`, `ln(...)`, `sqrt(...)`
- parentheses for grouping

For example: `sin(2)`, `3^2-4`, `sqrt(4)*ln(2+1)`, `1/(5-2)`.

## Usage

```python
from sinusplot.expression import ExpressionError, evaluate, is_well_formed, normalize

evaluate("2+3*4")

try:
    evaluate("1/0")
except ExpressionError as exc:
    print("cannot evaluate:", exc)
```

`evaluate` returns the value of the expression as a float. It raises
`ExpressionError` (a subclass of `ValueError`) for malformed input,
division by zero, and logarithms or square roots of negative numbers.

`normalize` turns an expression into the compact form the evaluator works
on: function names become one-letter codes (`s`, `c`, `t`, `q`, `l`) and a
leading minus becomes a subtraction from zero. `is_well_formed` checks that
compact form for syntax errors without computing anything.

## What this package does not do

There is no plotting window and no command to run. The package does not
substitute values of `x` into an expression, map results to screen
coordinates or draw a graph; it provides the expression evaluator only.

## Tests

```
pip install -e .[test]
pytest
```