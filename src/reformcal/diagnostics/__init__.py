"""Diagnostics package.

Light-weight tools run through `reformcal diag <tool>`; `year_table --plot`
needs the optional matplotlib extra.
"""

__all__ = ["self_check", "year_table"]
