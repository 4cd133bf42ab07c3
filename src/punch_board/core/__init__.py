"""
Core domain models and calculators.

Pure, stateless code: no configuration, no logging, no I/O.
"""
