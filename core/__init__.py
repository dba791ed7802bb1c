"""
Core - shared infrastructure for NextIntern

- conf: policy settings accessors
- db: abstract model mixins
"""
