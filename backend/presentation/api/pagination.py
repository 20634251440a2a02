"""
Custom pagination classes for the API.

Pages are zero-based. The body carries only the page content; totals
and navigation travel in ``X-Total-Count`` and ``Link`` headers.
"""

from urllib.parse import urlencode

from rest_framework.exceptions import ValidationError
from rest_framework.pagination import BasePagination
from rest_framework.response import Response

from domain.shared.pagination import Page, PageRequest, SortOrder

# Largest row offset a database accepts (signed 64-bit)
MAX_OFFSET = 2 ** 63 - 1


class StandardResultsSetPagination(BasePagination):
    """
    Standard pagination class that allows size to be set via query parameter.
    
    ``?page=N&size=M&sort=field,desc`` (``sort`` may repeat).
    Default size is 20, max is 1000.
    """
    
    page_query_param = 'page'
    page_size_query_param = 'size'
    sort_query_param = 'sort'
    page_size = 20
    max_page_size = 1000
    
    def get_page_request(self, request) -> PageRequest:
        params = request.query_params
        page = self._parse_int(params, self.page_query_param, 0, minimum=0)
        size = self._parse_int(params, self.page_size_query_param, self.page_size, minimum=1)
        size = min(size, self.max_page_size)
        if (page + 1) * size > MAX_OFFSET:
            raise ValidationError({self.page_query_param: ['Page index is out of range.']})
        sort = tuple(
            SortOrder.parse(value)
            for value in params.getlist(self.sort_query_param)
            if value
        )
        return PageRequest(page=page, size=size, sort=sort)
    
    def get_paginated_response(self, page: Page, request) -> Response:
        headers = {'X-Total-Count': str(page.total)}
        link = self.get_link_header(page, request)
        if link:
            headers['Link'] = link
        return Response(page.content, headers=headers)
    
    def get_link_header(self, page: Page, request) -> str:
        base_url = request.build_absolute_uri(request.path)
        last_page = max(page.total_pages - 1, 0)
        links = []
        if page.has_next:
            links.append(self._link(base_url, request, page.number + 1, page.size, 'next'))
        if page.has_previous:
            links.append(self._link(base_url, request, page.number - 1, page.size, 'prev'))
        links.append(self._link(base_url, request, last_page, page.size, 'last'))
        links.append(self._link(base_url, request, 0, page.size, 'first'))
        return ','.join(links)
    
    def _link(self, base_url, request, page_number, size, rel) -> str:
        query = [
            (self.page_query_param, page_number),
            (self.page_size_query_param, size),
        ]
        query.extend(
            (self.sort_query_param, value)
            for value in request.query_params.getlist(self.sort_query_param)
        )
        return f'<{base_url}?{urlencode(query)}>; rel="{rel}"'
    
    def _parse_int(self, params, name, default, minimum):
        raw = params.get(name)
        if raw in (None, ''):
            return default
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ValidationError({name: ['A valid integer is required.']})
        if value < minimum:
            raise ValidationError({name: [f'Ensure this value is greater than or equal to {minimum}.']})
        return value
    
    # =========================================================================
    # Schema
    # =========================================================================
    
    def get_paginated_response_schema(self, schema):
        return schema
    
    def get_schema_operation_parameters(self, view):
        return [
            {
                'name': self.page_query_param,
                'required': False,
                'in': 'query',
                'description': 'Zero-based page index.',
                'schema': {'type': 'integer', 'minimum': 0},
            },
            {
                'name': self.page_size_query_param,
                'required': False,
                'in': 'query',
                'description': f'Page size, at most {self.max_page_size}.',
                'schema': {'type': 'integer', 'minimum': 1},
            },
            {
                'name': self.sort_query_param,
                'required': False,
                'in': 'query',
                'description': 'Sort criterion in the format "field,asc|desc". Repeatable.',
                'schema': {'type': 'array', 'items': {'type': 'string'}},
                'explode': True,
            },
        ]
