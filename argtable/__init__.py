"""Table-driven command-line option parsing, usage formatting and a chained hash table."""

__version__ = "0.1.0"
__all__ = ["core", "getopt", "parser", "printing", "hashtable"]