from alibigen.encodings.cardinality import (
    at_least_one, at_most_one, exactly_one, define_and, define_or
)

__all__ = ["at_least_one", "at_most_one", "exactly_one", "define_and", "define_or"]
