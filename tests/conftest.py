"""
Pytest configuration and fixtures.
"""
import pytest


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def user(django_user_model):
    """A customer with a complete profile."""
    from modules.users.models import UserProfileModel

    user = django_user_model.objects.create_user(
        email='test@example.com',
        password='testpass123',
    )
    UserProfileModel.objects.create(
        user=user,
        full_name='Test User',
        phone='081234567890',
        address='Jl. Kopi No. 1, Jakarta',
    )
    return user


@pytest.fixture
def other_user(django_user_model):
    """A second customer without a profile."""
    return django_user_model.objects.create_user(
        email='other@example.com',
        password='testpass123',
    )


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        email='admin@example.com',
        password='testpass123',
        is_staff=True,
        role='admin',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def admin_client(api_client, staff_user):
    api_client.force_authenticate(user=staff_user)
    return api_client


@pytest.fixture
def make_product(db):
    """Factory for catalog products."""
    from modules.products.models import ProductModel

    def _make_product(name='Caramel Latte', price=20000, stock=10, **kwargs):
        return ProductModel.objects.create(name=name, price=price, stock=stock, **kwargs)

    return _make_product


@pytest.fixture
def size_large(db):
    from modules.products.models import ProductSizeModel
    return ProductSizeModel.objects.create(name='Large', price_adjustment=5000)


@pytest.fixture
def temperature_ice(db):
    from modules.products.models import ProductTemperatureModel
    return ProductTemperatureModel.objects.create(name='Ice', price_adjustment=2000)


@pytest.fixture
def variant_hazelnut(db):
    from modules.products.models import ProductVariantModel
    return ProductVariantModel.objects.create(name='Hazelnut Syrup', price_adjustment=3000)


@pytest.fixture
def add_to_cart(db):
    """Put a line straight into a user's cart, bypassing stock checks."""
    from modules.orders.models import CartItemModel

    def _add_to_cart(user, product, quantity=1, **options):
        return CartItemModel.objects.create(user=user, product=product, quantity=quantity, **options)

    return _add_to_cart
