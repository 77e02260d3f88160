"""
Air-standard cycle comparison: Dual, Otto, Diesel and Atkinson cycles
on a single P-V diagram.
"""
