from jinjaview.http.response_helper import ResponseHelper

__all__ = [
    'ResponseHelper',
]
