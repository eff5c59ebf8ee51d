"""auto-doc-generator: inserts docstring and JSDoc templates above undocumented declarations."""

__version__ = "0.1.0"
