from .story import (
    StoryDTO, ApiResponseDTO, LoginRequest, LoginResponse, StoryRunState
)
