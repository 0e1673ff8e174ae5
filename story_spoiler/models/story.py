from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class StoryDTO(BaseModel):
    """A story spoiler as sent to and returned by the API"""
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None


class ApiResponseDTO(BaseModel):
    """Envelope returned by create, edit and delete"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    story_id: Optional[str] = Field(default=None, alias="storyId")  # only set on create
    msg: Optional[str] = None


# Auth models
class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(alias="userName")
    password: str


class LoginResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    access_token: str = Field(alias="accessToken")


class StoryRunState(BaseModel):
    """State carried between the ordered test cases of one run"""

    last_created_story_id: Optional[str] = None

    def remember(self, story_id: Optional[str]):
        self.last_created_story_id = story_id

    def require_story_id(self) -> str:
        assert self.last_created_story_id, "No story was created earlier in this run"
        return self.last_created_story_id

    def clear(self):
        self.last_created_story_id = None
