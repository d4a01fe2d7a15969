"""
models/ - Domain Models
=======================
Plain dataclasses mirroring the rows the repositories read and write.
"""
