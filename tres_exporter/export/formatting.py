"""
Number-to-text conversion for .tres output

=============================================================================
MATCHING THE EDITOR'S NUMBER FORMAT
=============================================================================

The editor plugin builds the resource text with JavaScript template
strings, so every number goes through Number#toString. Downstream tooling
diffs exported files, so we print numbers the same way:

    5.0      -> "5"          integral floats lose their ".0"
    1.5      -> "1.5"        shortest round-trip decimal
    0.00001  -> "0.00001"    positional down to 1e-6
    1e-07    -> "1e-7"       exponent below that, no zero padding
    1e21     -> "1e+21"      and from 1e21 upwards

Python's repr() switches to exponents much earlier (1e-05, 1e+16), hence
numpy's configurable float formatters.

=============================================================================
"""

import numbers

import numpy as np

_EXPONENT_LOW = 1e-6
_EXPONENT_HIGH = 1e21


def format_number(value) -> str:
    """Render a number like the editor's scripting host would."""
    if isinstance(value, (bool, np.bool_)):
        return 'true' if value else 'false'
    if isinstance(value, numbers.Integral):
        return str(int(value))

    value = float(value)
    if value == 0:
        return '0'
    if np.isnan(value):
        return 'NaN'
    if np.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'

    if _EXPONENT_LOW <= abs(value) < _EXPONENT_HIGH:
        return np.format_float_positional(value, trim='-')
    return np.format_float_scientific(value, trim='-', exp_digits=1)


def format_list(values) -> str:
    """Comma separated numbers, as inside PoolVector2Array( ... )."""
    return ', '.join(format_number(value) for value in values)
