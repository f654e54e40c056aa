"""
Color-table feature (GET /colors, GET /colors/{color}).
"""
