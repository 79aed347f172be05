"""
mathfn Runtime.

Value adapter, argument validation, flattening and the operations
themselves.
"""
