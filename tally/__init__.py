"""tally — left-to-right running-total calculator.

Tokenizes flat arithmetic strings ("12.5/2", "10*-2") into signed numbers and
operators and reduces them strictly left to right, with no precedence. A
headless input controller reproduces the key-press behavior of a basic desk
calculator on top of the engine.

Usage:
    python -m tally eval "2+3*4"          # 20
    python -m tally tokens "10*-2"        # Show the token stream
    python -m tally press "12+3=%"        # Drive the calculator with keys
    python -m tally repl                  # Interactive calculator
"""
