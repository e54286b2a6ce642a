"""
Pagination utilities for the project.

Defines the default page number pagination class used across DRF
endpoints.  Clients may shrink or grow a page with ``?limit=`` up to
``max_page_size``.
"""
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class DefaultPagination(PageNumberPagination):
    """A simple page number paginator with a default page size."""
    page_size = 20
    page_size_query_param = "limit"
    max_page_size = 100


class SummaryPagination(DefaultPagination):
    """
    Page number paginator that reports position the way the site frontend
    expects: ``{"results": [...], "pagination": {current, pages, total,
    has_next, has_prev}}``.
    """

    def get_paginated_response(self, data):
        page = self.page
        return Response({
            "results": data,
            "pagination": {
                "current": page.number,
                "pages": page.paginator.num_pages,
                "total": page.paginator.count,
                "has_next": page.has_next(),
                "has_prev": page.has_previous(),
            },
        })

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "results": schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "current": {"type": "integer"},
                        "pages": {"type": "integer"},
                        "total": {"type": "integer"},
                        "has_next": {"type": "boolean"},
                        "has_prev": {"type": "boolean"},
                    },
                },
            },
        }
