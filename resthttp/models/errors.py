class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Base URL required. Pass base_url or set RESTHTTP_BASE_URL.",
    ):
        self.message = message
        super().__init__(self.message)
