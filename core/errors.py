# =============================================================================
# core/errors.py  —  Error taxonomy for the shopping engine
# =============================================================================
#
# Only two things can go wrong in a request:
#   - the caller named a product that does not exist   → ProductNotFoundError
#   - the request itself is malformed                  → RequestValidationError
#
# A missing or corrupt catalog file is NOT an error: the Catalog Store
# silently substitutes the built-in fallback dataset.
#
# The tools/ layer catches CommerceError and turns it into an {"error": ...}
# response; nothing here ever crashes the server process.
# =============================================================================


class CommerceError(Exception):
    """Base class for errors that are reported back to the caller."""


class ProductNotFoundError(CommerceError):
    def __init__(self, product_id: str):
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class RequestValidationError(CommerceError):
    """A request was missing a required field or carried an invalid value."""
