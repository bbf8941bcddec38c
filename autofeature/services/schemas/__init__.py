from autofeature.services.schemas.attachments import (
    AttachmentCreate,
    AttachmentRead,
)
from autofeature.services.schemas.posts import (
    PostCreate,
    PostRead,
    PostStatusUpdate,
)
from autofeature.services.schemas.resolve import (
    ResolveRequest,
    ResolveResponse,
)
__all__ = [
    "AttachmentCreate",
    "AttachmentRead",
    "PostCreate",
    "PostRead",
    "PostStatusUpdate",
    "ResolveRequest",
    "ResolveResponse",
]
