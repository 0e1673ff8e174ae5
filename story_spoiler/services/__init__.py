from .story_client import (
    StorySpoilerClient, StorySpoilerAPIError, AuthenticationError,
    get_jwt_token, parse_api_response, parse_story_list
)
