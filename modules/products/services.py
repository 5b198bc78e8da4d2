"""
Products module service layer.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from .models import (
    ProductModel,
    ProductSizeModel,
    ProductTemperatureModel,
    ProductVariantModel,
)
from .exceptions import ProductNotFoundError, VariantOptionNotFoundError


@dataclass(frozen=True)
class ProductPricing:
    """Live price and stock snapshot of a product."""
    product_id: int
    price: int
    stock: int
    is_active: bool
    variant_adjustments: Dict[str, int] = field(default_factory=dict)


def variant_adjustment(
    size: Optional[ProductSizeModel] = None,
    temperature: Optional[ProductTemperatureModel] = None,
    variant: Optional[ProductVariantModel] = None,
) -> int:
    """Sum the price deltas of the selected options; unselected options add nothing."""
    return sum(
        option.price_adjustment or 0
        for option in (size, temperature, variant)
        if option is not None
    )


class ProductService:
    """
    Product catalog service.
    """

    OPTION_MODELS = {
        'size': ProductSizeModel,
        'temperature': ProductTemperatureModel,
        'variant': ProductVariantModel,
    }

    def get_product_by_id(self, product_id: int) -> Optional[ProductModel]:
        """Get product by ID."""
        try:
            return ProductModel.objects.get(id=product_id, deleted_at__isnull=True)
        except ProductModel.DoesNotExist:
            return None

    def get_option(self, option_type: str, option_id: Optional[int]):
        """Resolve a size/temperature/variant selector; None stays None."""
        if not option_id:
            return None
        model = self.OPTION_MODELS[option_type]
        try:
            return model.objects.get(id=option_id)
        except model.DoesNotExist:
            raise VariantOptionNotFoundError(option_type, str(option_id))

    def get_product_pricing_and_stock(
        self,
        product_id: int,
        size_id: Optional[int] = None,
        temperature_id: Optional[int] = None,
        variant_id: Optional[int] = None,
    ) -> ProductPricing:
        """
        Read the current price, stock and option adjustments of a product.

        Args:
            product_id: Product ID
            size_id: Optional size selector
            temperature_id: Optional temperature selector
            variant_id: Optional flavor/add-on selector

        Returns:
            ProductPricing with adjustments keyed by option type

        Raises:
            ProductNotFoundError: If the product does not exist
        """
        product = self.get_product_by_id(product_id)
        if not product:
            raise ProductNotFoundError(str(product_id))

        selected = {
            'size': size_id,
            'temperature': temperature_id,
            'variant': variant_id,
        }
        adjustments = {}
        for option_type, option_id in selected.items():
            option = self.get_option(option_type, option_id)
            if option is not None:
                adjustments[option_type] = option.price_adjustment

        return ProductPricing(
            product_id=product.id,
            price=product.price,
            stock=product.stock,
            is_active=product.is_purchasable,
            variant_adjustments=adjustments,
        )
