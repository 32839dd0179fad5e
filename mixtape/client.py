# ============================================================================
# FILE: mixtape/client.py
# Python consumer of the REST API
# ============================================================================
import httpx
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error answered by the server, or raised when it cannot be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload or {"error": message}


class AuthenticationRequired(ApiError):
    """The server rejected the token; it has been discarded"""


class ApiClient:
    """
    Thin client for the playlist API.

    Keeps the token returned by register/login and sends it as a bearer
    header. Any 401 drops the token, except on the login and register calls
    themselves, which are allowed to fail without logging anyone out.
    """

    def __init__(self, base_url: str = "http://localhost:8000/api", token: Optional[str] = None,
                 http_client: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self._http = http_client or httpx.Client(timeout=timeout)
        self._owns_http = http_client is None

    def close(self):
        if self._owns_http:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, json: Any = None, auth_call: bool = False) -> Dict:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self._http.request(method, f"{self.base_url}{path}", json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"API unreachable on {method} {path}: {e}")
            raise ApiError("No se pudo conectar con el servidor") from e

        if response.status_code == 204:
            return {}
        try:
            data = response.json()
        except ValueError:
            data = {"error": "Respuesta no válida"}

        if response.is_error:
            message = data.get("error", "Error") if isinstance(data, dict) else "Error"
            if response.status_code == 401 and not auth_call:
                self.token = None
                raise AuthenticationRequired(message, response.status_code, data)
            raise ApiError(message, response.status_code, data)
        return data

    # auth
    def register(self, username: str, password: str) -> Dict:
        data = self._request("POST", "/register", {"username": username, "password": password}, auth_call=True)
        self.token = data["token"]
        return data

    def login(self, username: str, password: str) -> Dict:
        data = self._request("POST", "/login", {"username": username, "password": password}, auth_call=True)
        self.token = data["token"]
        return data

    def logout(self):
        # Tokens are stateless; forgetting it is all there is
        self.token = None

    def me(self) -> Dict:
        return self._request("GET", "/me")

    def is_authenticated(self) -> bool:
        """True when a token is held and the server still accepts it"""
        if not self.token:
            return False
        try:
            self.me()
            return True
        except ApiError:
            self.logout()
            return False

    # playlists
    def playlists(self) -> Dict:
        return self._request("GET", "/playlists")

    def create_playlist(self, nombre: str) -> Dict:
        return self._request("POST", "/playlists", {"nombre": nombre})

    def get_playlist(self, playlist_id: int) -> Dict:
        return self._request("GET", f"/playlists/{playlist_id}")

    def rename_playlist(self, playlist_id: int, nombre: str) -> Dict:
        return self._request("PUT", f"/playlists/{playlist_id}", {"nombre": nombre})

    def delete_playlist(self, playlist_id: int) -> Dict:
        return self._request("DELETE", f"/playlists/{playlist_id}")

    def clear_playlist(self, playlist_id: int) -> Dict:
        return self._request("DELETE", f"/playlists/{playlist_id}/songs")

    # songs
    def add_song(self, playlist_id: int, titulo: str = None, artista: str = None,
                 ruta: str = None, duration: Optional[int] = None) -> Dict:
        song = {"titulo": titulo, "artista": artista, "ruta": ruta}
        if duration is not None:
            song["duration"] = duration
        return self._request("POST", f"/playlists/{playlist_id}/songs", song)

    def delete_song(self, playlist_id: int, song_id: int) -> Dict:
        return self._request("DELETE", f"/playlists/{playlist_id}/songs/{song_id}")
