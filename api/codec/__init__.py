"""
Resistor color-band codec.

Pure functions over a fixed color table: no I/O, no logging, no shared
mutable state. The HTTP features (`colors/`, `resistors/`) call into it.
"""
