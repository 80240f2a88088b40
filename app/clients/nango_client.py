import httpx

from app.core import config
from app.core.errors import ConfigError, NangoError


class NangoClient:
    """Thin wrapper over the Nango REST API (connections and synced records)."""

    def __init__(self, secret_key: str, host: str = config.NANGO_HOST, transport=None, timeout: float = 30.0):
        self._client = httpx.Client(
            base_url=host,
            headers={"Authorization": f"Bearer {secret_key}"},
            transport=transport,
            timeout=timeout,
        )

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _get(self, path: str, params=None, headers=None):
        try:
            response = self._client.get(path, params=params, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NangoError(
                f"Nango {path} returned {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise NangoError(f"Nango {path} unreachable: {e}") from e
        return response.json()

    def list_connections(self) -> list[dict]:
        data = self._get("/connection")
        return data.get("connections", [])

    def list_records(self, provider_config_key: str, connection_id: str, model: str, limit: int = config.NANGO_RECORD_LIMIT) -> list[dict]:
        data = self._get(
            "/records",
            params={"model": model, "limit": limit},
            headers={
                "Connection-Id": connection_id,
                "Provider-Config-Key": provider_config_key,
            },
        )
        return data.get("records", [])


def get_nango_client() -> NangoClient:
    if not config.NANGO_SECRET_KEY:
        raise ConfigError("NANGO_SECRET_KEY is not set")
    return NangoClient(config.NANGO_SECRET_KEY)
