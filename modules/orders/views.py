"""
Orders module API views.
"""
import logging

from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.interfaces.pagination import HistoryPagination

from .services import CartService, CheckoutRequest, CheckoutService, OrderService
from .serializers import (
    CartItemCreateSerializer,
    CartItemSerializer,
    CartLineSerializer,
    CheckoutSerializer,
    CheckoutResultSerializer,
    OrderHistorySerializer,
    OrderDetailSerializer,
    OrderStatusUpdateSerializer,
)


logger = logging.getLogger(__name__)

cart_service = CartService()
checkout_service = CheckoutService()
order_service = OrderService()


ERROR_RESPONSE = {
    'type': 'object',
    'properties': {
        'status': {'type': 'integer'},
        'message': {'type': 'string'},
        'code': {'type': 'string'},
    }
}


@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Cart list and add endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: CartLineSerializer(many=True), 401: ERROR_RESPONSE},
        summary="Get current user's cart",
        description="장바구니 조회 (현재 가격 기준)",
    )
    def get(self, request):
        lines, subtotal = cart_service.get_priced_cart(request.user.id)
        return Response(
            {
                'status': 200,
                'message': 'Cart retrieved',
                'data': {
                    'items': CartLineSerializer(lines, many=True).data,
                    'subtotal': subtotal,
                },
            },
            status=status.HTTP_200_OK
        )

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={200: CartItemSerializer, 201: CartItemSerializer, 400: ERROR_RESPONSE, 404: ERROR_RESPONSE},
        summary="Add item to cart",
        description="장바구니에 상품 추가 (동일 옵션이면 수량 합산)",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        item, created = cart_service.add_item(
            user_id=request.user.id,
            product_id=data['product_id'],
            quantity=data['quantity'],
            size_id=data.get('size_id'),
            temperature_id=data.get('temperature_id'),
            variant_id=data.get('variant_id'),
        )

        status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
        return Response(
            {
                'status': status_code,
                'message': 'Added to cart successfully' if created else 'Cart updated successfully',
                'data': CartItemSerializer(item).data,
            },
            status=status_code
        )


@extend_schema(tags=['Transactions'])
class CheckoutView(APIView):
    """Checkout endpoint: turns the cart into an order."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=CheckoutSerializer,
        responses={
            201: CheckoutResultSerializer,
            400: ERROR_RESPONSE,
            401: ERROR_RESPONSE,
            500: ERROR_RESPONSE,
        },
        summary="Checkout cart",
        description="장바구니 결제 - 주문 생성, 재고 차감, 장바구니 비우기를 하나의 트랜잭션으로 처리",
    )
    def post(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        order = checkout_service.checkout(
            request.user.id,
            CheckoutRequest(
                email=data.get('email', ''),
                full_name=data.get('full_name', ''),
                address=data.get('address', ''),
                delivery_method=data.get('delivery_method', ''),
                payment_method_id=data['payment_method_id'],
            ),
        )

        return Response(
            {
                'status': 201,
                'message': 'Order created successfully',
                'data': CheckoutResultSerializer(order).data,
            },
            status=status.HTTP_201_CREATED
        )


@extend_schema(tags=['History'])
class OrderHistoryView(APIView):
    """Paginated order history of the current user."""
    permission_classes = [IsAuthenticated]
    pagination_class = HistoryPagination

    @extend_schema(
        parameters=[
            OpenApiParameter('status', str, description='pending, shipping, done, cancelled'),
            OpenApiParameter('page', int),
            OpenApiParameter('limit', int),
        ],
        responses={200: OrderHistorySerializer(many=True), 400: ERROR_RESPONSE},
        summary="List user's order history",
        description="주문 내역 조회",
    )
    def get(self, request):
        orders = order_service.get_user_orders(
            request.user.id,
            status=request.query_params.get('status', '').strip() or None,
        )
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(orders, request, view=self)
        return paginator.get_paginated_response(OrderHistorySerializer(page, many=True).data)


@extend_schema(tags=['History'])
class OrderDetailView(APIView):
    """Order detail endpoint for the order's owner."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderDetailSerializer, 404: ERROR_RESPONSE},
        summary="Get order detail",
        description="주문 상세 조회",
    )
    def get(self, request, order_id: int):
        order = order_service.get_user_order(request.user.id, order_id)
        return Response(
            {
                'status': 200,
                'message': 'Order detail retrieved successfully',
                'data': OrderDetailSerializer(order).data,
            },
            status=status.HTTP_200_OK
        )


@extend_schema(tags=['Admin - Orders'])
class AdminOrderStatusView(APIView):
    """Order status transition endpoint (staff only)."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=OrderStatusUpdateSerializer,
        responses={200: OrderHistorySerializer, 404: ERROR_RESPONSE, 409: ERROR_RESPONSE},
        summary="Update order status",
        description="주문 상태 변경 (pending → shipping → done, 또는 cancelled)",
    )
    def patch(self, request, order_id: int):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = order_service.change_status(order_id, serializer.validated_data['status'])
        return Response(
            {
                'status': 200,
                'message': 'Status updated',
                'data': OrderHistorySerializer(order).data,
            },
            status=status.HTTP_200_OK
        )


@extend_schema(tags=['Admin - Orders'])
class AdminOrderDeleteView(APIView):
    """Order delete endpoint (staff only)."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        responses={204: None, 404: ERROR_RESPONSE},
        summary="Delete order",
        description="주문 삭제 (주문 상품 포함)",
    )
    def delete(self, request, order_id: int):
        order_service.delete_order(order_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
