from autofeature.domain.enums.axis import Axis
from autofeature.domain.enums.post_status import PostStatus
from autofeature.domain.enums.resolution_policy import ResolutionPolicy
__all__ = [
    "Axis",
    "PostStatus",
    "ResolutionPolicy",
]
