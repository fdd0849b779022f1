"""Abstract data types: bounded lists, AVL trees and hash tables."""

__version__ = "0.1.0"