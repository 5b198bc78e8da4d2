"""
Products module Django ORM models.
"""
from django.db import models


class ProductModel(models.Model):
    """Product (상품) model."""

    name = models.CharField(
        max_length=200,
        db_index=True,
        verbose_name='상품명'
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name='상품 설명'
    )
    price = models.PositiveIntegerField(
        verbose_name='기본가',
        help_text='최소 화폐 단위'
    )
    # PositiveIntegerField adds a stock >= 0 check constraint at the database level.
    stock = models.PositiveIntegerField(
        default=0,
        verbose_name='재고'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='판매 여부'
    )
    is_flash_sale = models.BooleanField(
        default=False,
        verbose_name='플래시 세일'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='생성시각'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='수정시각'
    )
    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='논리적삭제플래그'
    )

    class Meta:
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def is_deleted(self) -> bool:
        """Check if product is soft deleted."""
        return self.deleted_at is not None

    @property
    def is_purchasable(self) -> bool:
        return self.is_active and not self.is_deleted


class VariantOptionModel(models.Model):
    """Common shape of a selectable option carrying a price delta."""

    name = models.CharField(
        max_length=50,
        verbose_name='옵션명'
    )
    price_adjustment = models.IntegerField(
        default=0,
        verbose_name='추가 금액'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='생성시각'
    )

    class Meta:
        abstract = True
        ordering = ['id']

    def __str__(self):
        return f"{self.name} (+{self.price_adjustment})"


class ProductSizeModel(VariantOptionModel):
    """Cup size option (regular, medium, large)."""

    class Meta(VariantOptionModel.Meta):
        db_table = 'product_sizes'
        verbose_name = 'Product Size'
        verbose_name_plural = 'Product Sizes'


class ProductTemperatureModel(VariantOptionModel):
    """Temperature option (hot, ice)."""

    class Meta(VariantOptionModel.Meta):
        db_table = 'product_temperatures'
        verbose_name = 'Product Temperature'
        verbose_name_plural = 'Product Temperatures'


class ProductVariantModel(VariantOptionModel):
    """Flavor / add-on option."""

    class Meta(VariantOptionModel.Meta):
        db_table = 'product_variants'
        verbose_name = 'Product Variant'
        verbose_name_plural = 'Product Variants'
