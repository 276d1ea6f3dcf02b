"""
Service layer abstraction.

The recipe store encapsulates every read and write of the recipe
collection so that API handlers never touch the underlying mapping.
"""
