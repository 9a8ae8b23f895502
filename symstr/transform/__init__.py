# Transform package for symstr
"""
Deterministic transformations over concrete literal strings.

patterns — substr, replace, escape, unescape and occurrence counting
lookup   — key lookups over string-valued mappings
"""
