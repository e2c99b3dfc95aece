class PostStoreError(Exception):
    """Base class for errors raised by the post store"""


class PostValidationError(PostStoreError):
    """Post content or comment text failed validation"""


class PostNotFoundError(PostStoreError):
    """No post exists with the requested ID"""

    def __init__(self, post_id: int):
        super().__init__(f"post {post_id} not found")
        self.post_id = post_id
