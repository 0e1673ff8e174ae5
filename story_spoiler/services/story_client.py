"""
Story Spoiler API Client
Handles bearer-token login and the story CRUD endpoints.
"""
import time
import logging
from typing import Optional, List, Dict, Any, Union

import requests
from pydantic import BaseModel, ValidationError

from story_spoiler import config
from story_spoiler.models import StoryDTO, ApiResponseDTO, LoginRequest, LoginResponse
from story_spoiler.services.logging_service import log_api_call

logger = logging.getLogger(__name__)


class StorySpoilerAPIError(Exception):
    """Base exception for Story Spoiler API errors"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(StorySpoilerAPIError):
    """Raised when the login call does not yield an access token"""
    pass


StoryBody = Union[StoryDTO, Dict[str, Any]]


def _to_body(story: StoryBody) -> Dict[str, Any]:
    if isinstance(story, BaseModel):
        return story.model_dump(by_alias=True)
    return dict(story)


def get_jwt_token(
    base_url: str,
    user_name: str,
    password: str,
    timeout: float = config.REQUEST_TIMEOUT,
    session: Optional[requests.Session] = None
) -> str:
    """Log in and return the access token from the response body"""
    url = f"{base_url.rstrip('/')}{config.AUTH_PATH}"
    body = LoginRequest(user_name=user_name, password=password).model_dump(by_alias=True)

    login_session = session or requests.Session()
    try:
        start_time = time.time()
        response = login_session.post(url, json=body, timeout=timeout)
        log_api_call("POST", config.AUTH_PATH, response.status_code, (time.time() - start_time) * 1000)
    except requests.RequestException as e:
        logger.error(f"Login request failed: {e}")
        raise AuthenticationError(f"Login request failed: {e}") from e
    finally:
        if session is None:
            login_session.close()

    if not response.ok:
        raise AuthenticationError(
            f"Login failed with status {response.status_code}: {response.text[:200]}",
            status_code=response.status_code
        )

    try:
        token = LoginResponse.model_validate(response.json()).access_token
    except (ValueError, ValidationError) as e:
        raise AuthenticationError(
            f"Login response has no access token: {response.text[:200]}",
            status_code=response.status_code
        ) from e

    if not token:
        raise AuthenticationError("Login returned an empty access token", status_code=response.status_code)

    logger.info(f"Authenticated as {user_name}")
    return token


def parse_api_response(response: requests.Response) -> ApiResponseDTO:
    """Deserialize a create/edit/delete envelope"""
    try:
        data = response.json()
    except ValueError as e:
        raise StorySpoilerAPIError(
            f"Response is not JSON: {response.text[:200]}", status_code=response.status_code
        ) from e

    if not isinstance(data, dict):
        raise StorySpoilerAPIError(
            f"Expected a JSON object, got {type(data).__name__}", status_code=response.status_code
        )

    try:
        return ApiResponseDTO.model_validate(data)
    except ValidationError as e:
        raise StorySpoilerAPIError(f"Unexpected response shape: {e}", status_code=response.status_code) from e


def parse_story_list(response: requests.Response) -> List[StoryDTO]:
    """Deserialize the list returned by GET /api/Story/All"""
    try:
        data = response.json()
    except ValueError as e:
        raise StorySpoilerAPIError(
            f"Response is not JSON: {response.text[:200]}", status_code=response.status_code
        ) from e

    if not isinstance(data, list):
        raise StorySpoilerAPIError(
            f"Expected a JSON array, got {type(data).__name__}", status_code=response.status_code
        )

    try:
        return [StoryDTO.model_validate(item) for item in data]
    except ValidationError as e:
        raise StorySpoilerAPIError(f"Unexpected story shape: {e}", status_code=response.status_code) from e


class StorySpoilerClient:
    """Authenticated client for the story endpoints.

    Every call returns the raw response; status codes, including 4xx,
    are left for the caller to check.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = config.REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}"
        })

    @classmethod
    def login(
        cls,
        base_url: str = config.BASE_URL,
        user_name: str = config.USERNAME,
        password: str = config.PASSWORD,
        timeout: float = config.REQUEST_TIMEOUT
    ) -> "StorySpoilerClient":
        """Authenticate and return a client carrying the bearer token"""
        token = get_jwt_token(base_url, user_name, password, timeout=timeout)
        return cls(base_url, token, timeout=timeout)

    def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug(f"Sending {method} {path}", extra={"method": method, "path": path})

        start_time = time.time()
        try:
            response = self.session.request(method, url, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {type(e).__name__}: {e}")
            raise StorySpoilerAPIError(f"{method} {path} failed: {e}") from e

        log_api_call(method, path, response.status_code, (time.time() - start_time) * 1000)
        return response

    def create_story(self, story: StoryBody) -> requests.Response:
        return self._request("POST", config.CREATE_PATH, _to_body(story))

    def edit_story(self, story_id: str, story: StoryBody) -> requests.Response:
        return self._request("PUT", config.EDIT_PATH.format(story_id=story_id), _to_body(story))

    def get_all_stories(self) -> requests.Response:
        return self._request("GET", config.ALL_PATH)

    def delete_story(self, story_id: str) -> requests.Response:
        return self._request("DELETE", config.DELETE_PATH.format(story_id=story_id))

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
