# CLI package for symstr
"""
Read-only command line interface for evaluating symbolic string queries.

Commands:
    symstr classify  — Describe a set's shape
    symstr match     — Compare two sets
    symstr includes  — Check set membership
    symstr substr / replace / escape / unescape — Transform literals
"""
