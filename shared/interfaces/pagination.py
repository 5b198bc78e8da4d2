"""
Custom pagination classes.
"""
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class HistoryPagination(PageNumberPagination):
    """Page-number pagination for order history, wrapped in the API envelope."""
    page_size = 4
    page_size_query_param = 'limit'
    max_page_size = 50

    def get_paginated_response(self, data):
        return Response({
            'status': 200,
            'message': 'Order history retrieved',
            'data': data,
            'meta': {
                'page': self.page.number,
                'limit': self.get_page_size(self.request),
                'total_items': self.page.paginator.count,
                'total_pages': self.page.paginator.num_pages,
            },
        })
