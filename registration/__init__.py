"""
Registration feature package.

Assembles the guest roster, identification uploads, the marriage certificate
(when the roster requires one), terms acceptance and the signature into one
submission payload.
"""
