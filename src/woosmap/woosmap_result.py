"""
Response envelope returned by the API client.
"""

from typing import Any, Dict, Optional


class Result:
    """
    Parsed JSON body of one response plus its status.

    The status is assigned once by the API client after parsing; the payload
    is only ever read.
    """

    def __init__(self, payload: Dict[str, Any]):
        self._payload = payload
        self._status: Optional[str] = None

    @property
    def payload(self) -> Dict[str, Any]:
        return self._payload

    @property
    def status(self) -> Optional[str]:
        return self._status

    @status.setter
    def status(self, value: str) -> None:
        if self._status is not None:
            raise AttributeError(f"status already set to {self._status!r}")
        self._status = value

    def __getitem__(self, key: str) -> Any:
        return self._payload[key]

    def __contains__(self, key: str) -> bool:
        return key in self._payload

    def get(self, key: str, default: Any = None) -> Any:
        return self._payload.get(key, default)

    def dig(self, *path: Any, default: Any = None) -> Any:
        """
        Follow a path of keys and list indexes into the payload.

        Returns default as soon as a step is missing, e.g.
        result.dig("routes", 0, "legs", 0, "distance").
        """
        node: Any = self._payload
        for step in path:
            try:
                node = node[step]
            except (KeyError, IndexError, TypeError):
                return default
        return node

    def __repr__(self) -> str:
        return f"Result(status={self._status!r}, keys={sorted(self._payload)})"
