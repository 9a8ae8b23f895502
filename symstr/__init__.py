# symstr
# Symbolic string sets and their three-valued algebra

"""
Core invariant: a symbolic string is a normalized, non-empty set of atoms
(Literal, Wildcard, Void), and every relationship query between two such
sets answers TRUE, FALSE or UNKNOWN. UNKNOWN is a result, never a failure.

The modules are layered leaves first: truth, model, relations,
transform, defaults.
"""
