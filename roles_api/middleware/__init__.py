"""HTTP middleware. Applied in roles_api.main."""

from roles_api.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
