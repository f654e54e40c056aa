"""
Resistor conversion feature (value-from-bands, bands-from-value).
"""
