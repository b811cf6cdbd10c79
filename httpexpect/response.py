"""Response handle returned by Request.expect()"""

import requests

from .chain import Chain


class Response:
    """
    Pairs the request's failure chain with the raw response, if any.

    `raw` is None when the request was never sent (a failure was recorded
    while building it) or when the transport failed. Downstream assertions
    should check `failed` before inspecting `raw`.
    """

    def __init__(self, chain: Chain, raw: requests.Response | None = None):
        self.chain = chain
        self.raw = raw

    @property
    def failed(self) -> bool:
        return self.chain.failed()

    def __repr__(self) -> str:
        if self.raw is None:
            return "<Response [no response]>"
        return f"<Response [{self.raw.status_code}]>"
