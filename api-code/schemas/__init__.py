from .reply import ReplyOptionsResponse, ReplyRequest, ReplyResponse

__all__ = [
    "ReplyOptionsResponse",
    "ReplyRequest",
    "ReplyResponse",
]
