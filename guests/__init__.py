"""
Guests feature package.

Keeps the ordered guest roster in step with the selected guest count and
derives whether the registration needs a marriage certificate.
"""
