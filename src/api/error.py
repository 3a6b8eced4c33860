from typing import Dict, Optional

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Request failed because of the caller; message is safe to return."""

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = headers
        super().__init__(base_error.message)


class ServerError(Exception):
    """Request failed on our side; only the code reaches the client."""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
