# autofeature/database/models/__init__.py

from autofeature.database.core.main import Base
from autofeature.database.models.media import Attachment
from autofeature.database.models.post import Post, PostMeta
from autofeature.database.models.taxonomy import Term, PostTerm

__all__ = [
    "Base",
    "Attachment",
    "Post",
    "PostMeta",
    "Term",
    "PostTerm",
]
