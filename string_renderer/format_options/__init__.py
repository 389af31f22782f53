"""Format-option catalog — first-class definitions of the built-in options.

Each option has a category, worked examples and a locale-sensitivity flag
so that template authors and tooling can discover what a format string does.
"""
