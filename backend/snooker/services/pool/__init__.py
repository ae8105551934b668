"""Pool engine: table generation, collision/potting and scoring.

Everything in this package is plain integer arithmetic with no Flask or
database imports, so HTTP routes, background tasks and tests can all call
it directly and get the same answer for the same input.
"""
