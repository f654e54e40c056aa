"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that several features use (settings read
from the environment). Band encoding logic lives in `codec/`, and the HTTP
side of each feature in its own package (e.g. `resistors/`).
"""
