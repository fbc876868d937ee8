from rest_framework.pagination import PageNumberPagination


class ProductListPagination(PageNumberPagination):
    # The storefront grid shows 12 products per page
    page_size = 12
    # Allow clients to override page size with `?limit=`
    page_size_query_param = 'limit'
    max_page_size = 100
