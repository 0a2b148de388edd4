"""
Products app.

Product catalog: stock invariants, validation rules, query filters
and the persistence adapter for products.
"""
