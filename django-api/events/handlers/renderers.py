from rest_framework.renderers import JSONRenderer


class HalJSONRenderer(JSONRenderer):
    """JSON renderer advertising the HAL media type."""

    media_type = "application/hal+json"
    format = "hal"
