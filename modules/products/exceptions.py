"""
Product domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is missing, deleted or not for sale."""

    def __init__(self, product_id: str):
        super().__init__(entity_name="Product", entity_id=product_id, code="PRODUCT_NOT_FOUND")


class VariantOptionNotFoundError(EntityNotFoundError):
    """Raised when a size, temperature or variant selector does not exist."""

    def __init__(self, option_type: str, option_id: str):
        super().__init__(entity_name=option_type, entity_id=option_id, code="VARIANT_OPTION_NOT_FOUND")
