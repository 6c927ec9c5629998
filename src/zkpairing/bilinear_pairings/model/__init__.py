"""model package.

This package provides modules for computing bilinear pairings.

Modules:
    - line_functions.
    - miller_loop.
    - model_definition.
    - pairing.
"""
