"""HAL-shaped page envelope for collection endpoints."""

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class HalPagination(PageNumberPagination):
    """Page number pagination rendered as ``_embedded`` / ``_links`` / ``page``."""

    page_size_query_param = "size"
    max_page_size = 100
    embedded_name = "events"

    def get_paginated_response(self, data) -> Response:
        links = {"self": {"href": self.request.build_absolute_uri()}}
        next_url = self.get_next_link()
        if next_url:
            links["next"] = {"href": next_url}
        previous_url = self.get_previous_link()
        if previous_url:
            links["prev"] = {"href": previous_url}

        paginator = self.page.paginator
        return Response(
            {
                "_embedded": {self.embedded_name: data},
                "_links": links,
                "page": {
                    "size": paginator.per_page,
                    "totalElements": paginator.count,
                    "totalPages": paginator.num_pages,
                    "number": self.page.number,
                },
            }
        )
