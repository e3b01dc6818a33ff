"""HTTP middleware: request timeout and request ID.

Applied in main app; order matters (last added = outermost).
"""

from catalog.middleware.request_id import RequestIDMiddleware
from catalog.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
