"""
API tests for cart, checkout, history and admin order endpoints.
"""
from unittest import mock
from urllib.parse import urlencode

import pytest
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken

from modules.orders.models import CartItemModel, OrderModel, OrderItemModel
from modules.products.models import ProductModel


pytestmark = pytest.mark.django_db

CHECKOUT_URL = '/transactions/checkout'
HISTORY_URL = '/history'


def _create_order(user, status='pending', number='ORD-20250101-000001', total=25000):
    return OrderModel.objects.create(
        order_number=number,
        user=user,
        status=status,
        email=user.email,
        full_name='Test User',
        delivery_address='Jl. Kopi No. 1, Jakarta',
        subtotal=total,
        total=total,
    )


class TestCartAPI:
    def test_add_then_list(self, authenticated_client, make_product, size_large):
        product = make_product(price=20000, stock=5)

        response = authenticated_client.post(
            reverse('cart'),
            {'product_id': product.id, 'quantity': 2, 'size_id': size_large.id},
            format='json',
        )
        assert response.status_code == status.HTTP_201_CREATED

        response = authenticated_client.get(reverse('cart'))
        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['subtotal'] == 50000
        assert data['items'][0]['unit_price'] == 25000
        assert data['items'][0]['size'] == 'Large'

    def test_merge_returns_200(self, authenticated_client, make_product):
        product = make_product(stock=5)
        authenticated_client.post(reverse('cart'), {'product_id': product.id}, format='json')

        response = authenticated_client.post(reverse('cart'), {'product_id': product.id}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['quantity'] == 2

    def test_unknown_product_404(self, authenticated_client):
        response = authenticated_client.post(reverse('cart'), {'product_id': 9999}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'PRODUCT_NOT_FOUND'


class TestCheckoutAPI:
    def test_checkout_success(self, authenticated_client, user, make_product, add_to_cart):
        product = make_product(price=20000, stock=10)
        add_to_cart(user, product, quantity=2)

        response = authenticated_client.post(CHECKOUT_URL, {'delivery_method': 'door_delivery'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 201
        assert response.data['message'] == 'Order created successfully'
        data = response.data['data']
        assert data['order_number'].startswith('ORD-')
        assert data['status'] == 'pending'
        assert data['subtotal'] == 40000
        assert data['delivery_fee'] == 10000
        assert data['tax_amount'] == 0
        assert data['total'] == 50000
        assert data['email'] == 'test@example.com'
        assert data['address'] == 'Jl. Kopi No. 1, Jakarta'
        assert data['payment_method_id'] == 1
        assert ProductModel.objects.get(id=product.id).stock == 8
        assert not CartItemModel.objects.filter(user=user).exists()

    def test_checkout_with_jwt(self, api_client, user, make_product, add_to_cart):
        add_to_cart(user, make_product(), quantity=1)
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(user)}')

        response = api_client.post(CHECKOUT_URL, {}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert OrderModel.objects.get().user_id == user.id

    def test_unauthenticated(self, api_client):
        response = api_client.post(CHECKOUT_URL, {}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_empty_cart(self, authenticated_client):
        response = authenticated_client.post(CHECKOUT_URL, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Cart is empty'
        assert response.data['code'] == 'EMPTY_CART'

    def test_insufficient_stock(self, authenticated_client, user, make_product, add_to_cart):
        product = make_product(name='Affogato', stock=1)
        add_to_cart(user, product, quantity=3)

        response = authenticated_client.post(CHECKOUT_URL, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'INSUFFICIENT_STOCK'
        assert 'Affogato' in response.data['message']
        assert response.data['products'][0]['product_id'] == product.id
        assert OrderModel.objects.count() == 0

    def test_invalid_delivery_method(self, authenticated_client, user, make_product, add_to_cart):
        add_to_cart(user, make_product(), quantity=1)

        response = authenticated_client.post(CHECKOUT_URL, {'delivery_method': 'teleport'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'VALIDATION_ERROR'
        assert response.data['field'] == 'delivery_method'

    def test_missing_profile_fields(self, api_client, other_user, make_product, add_to_cart):
        api_client.force_authenticate(user=other_user)
        add_to_cart(other_user, make_product(), quantity=1)

        response = api_client.post(CHECKOUT_URL, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'required' in response.data['message']

    def test_storage_failure_hides_details(self, authenticated_client, user, make_product, add_to_cart):
        product = make_product(stock=5)
        add_to_cart(user, product, quantity=1)

        with mock.patch.object(
            OrderItemModel.objects, 'bulk_create',
            side_effect=DatabaseError('relation "order_items" does not exist'),
        ):
            response = authenticated_client.post(CHECKOUT_URL, {}, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['code'] == 'PERSISTENCE_ERROR'
        assert 'order_items' not in str(response.data)
        assert OrderModel.objects.count() == 0
        assert ProductModel.objects.get(id=product.id).stock == 5

    def test_multipart_form_fields(self, authenticated_client, user, make_product, add_to_cart):
        add_to_cart(user, make_product(price=20000), quantity=2)

        response = authenticated_client.post(
            CHECKOUT_URL, {'delivery_method': 'door_delivery', 'payment_method_id': ''}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.data['data']
        assert data['total'] == 50000
        assert data['payment_method_id'] == 1

    def test_urlencoded_blank_fields_use_defaults(self, authenticated_client, user, make_product, add_to_cart):
        add_to_cart(user, make_product(price=20000), quantity=1)

        response = authenticated_client.post(
            CHECKOUT_URL,
            urlencode({'email': '', 'address': '', 'delivery_method': '', 'payment_method_id': ''}),
            content_type='application/x-www-form-urlencoded',
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.data['data']
        assert data['delivery_method'] == 'dine_in'
        assert data['delivery_fee'] == 0
        assert data['payment_method_id'] == 1
        assert data['email'] == 'test@example.com'
        assert data['address'] == 'Jl. Kopi No. 1, Jakarta'

    def test_email_longer_than_column_rejected(self, authenticated_client, user, make_product, add_to_cart):
        add_to_cart(user, make_product(), quantity=1)
        email = f"{'a' * 60}@{'b' * 63}.{'c' * 63}.{'d' * 63}.com"
        assert len(email) == 256

        response = authenticated_client.post(CHECKOUT_URL, {'email': email}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data
        assert OrderModel.objects.count() == 0


class TestHistoryAPI:
    def test_paginates_four_per_page(self, authenticated_client, user):
        for n in range(6):
            _create_order(user, number=f'ORD-20250101-00000{n}')

        response = authenticated_client.get(HISTORY_URL)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['data']) == 4
        assert response.data['meta'] == {'page': 1, 'limit': 4, 'total_items': 6, 'total_pages': 2}

        response = authenticated_client.get(HISTORY_URL, {'page': 2})
        assert len(response.data['data']) == 2

    def test_status_filter_and_ownership(self, authenticated_client, user, other_user):
        _create_order(user, status='done', number='ORD-20250101-000001')
        _create_order(user, status='pending', number='ORD-20250101-000002')
        _create_order(other_user, status='done', number='ORD-20250101-000003')

        response = authenticated_client.get(HISTORY_URL, {'status': 'done'})

        assert [row['order_number'] for row in response.data['data']] == ['ORD-20250101-000001']

    def test_unknown_status_filter_rejected(self, authenticated_client, user):
        _create_order(user)

        response = authenticated_client.get(HISTORY_URL, {'status': 'refunded'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'VALIDATION_ERROR'
        assert response.data['field'] == 'status'

    def test_detail_includes_items(self, authenticated_client, user, make_product, add_to_cart, size_large):
        add_to_cart(user, make_product(price=20000), quantity=2, size=size_large)
        checkout = authenticated_client.post(reverse('transaction-checkout'), {}, format='json')
        order_id = checkout.data['data']['id']

        response = authenticated_client.get(reverse('order-detail', kwargs={'order_id': order_id}))

        assert response.status_code == status.HTTP_200_OK
        item = response.data['data']['items'][0]
        assert item['unit_price'] == 25000
        assert item['total_price'] == 50000
        assert item['size'] == 'Large'

    def test_detail_of_other_users_order_is_404(self, authenticated_client, other_user):
        order = _create_order(other_user)

        response = authenticated_client.get(reverse('order-detail', kwargs={'order_id': order.id}))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'ORDER_NOT_FOUND'


class TestAdminOrderAPI:
    def test_status_update(self, admin_client, user):
        order = _create_order(user)

        response = admin_client.patch(
            reverse('admin-order-status', kwargs={'order_id': order.id}),
            {'status': 'shipping'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['status'] == 'shipping'

    def test_invalid_transition_is_409(self, admin_client, user):
        order = _create_order(user, status='done')

        response = admin_client.patch(
            reverse('admin-order-status', kwargs={'order_id': order.id}),
            {'status': 'pending'},
            format='json',
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['code'] == 'INVALID_OPERATION'

    def test_customer_forbidden(self, authenticated_client, user):
        order = _create_order(user)

        response = authenticated_client.patch(
            reverse('admin-order-status', kwargs={'order_id': order.id}),
            {'status': 'shipping'},
            format='json',
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete(self, admin_client, user):
        order = _create_order(user)

        response = admin_client.delete(reverse('admin-order-delete', kwargs={'order_id': order.id}))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not OrderModel.objects.filter(id=order.id).exists()


def test_health(api_client):
    response = api_client.get(reverse('health'))

    assert response.status_code == status.HTTP_200_OK
    assert response.data['status'] == 'ok'


def test_readiness(api_client):
    response = api_client.get(reverse('health-ready'))

    assert response.status_code == status.HTTP_200_OK
    assert response.data['checks']['database']['healthy'] is True
