"""Configuration and constants for the Story Spoiler test suite."""
import os

from dotenv import load_dotenv

load_dotenv()

# Target service
BASE_URL = os.environ.get("STORY_SPOILER_BASE_URL", "https://d3s5nxhwblsjbi.cloudfront.net").rstrip("/")

# Test account credentials
USERNAME = os.environ.get("STORY_SPOILER_USERNAME", "tsvetaemdim")
PASSWORD = os.environ.get("STORY_SPOILER_PASSWORD", "tsvetaemdim135")

# Seconds to wait for each HTTP call
REQUEST_TIMEOUT = float(os.environ.get("STORY_SPOILER_TIMEOUT", "30"))

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get("LOG_FORMAT", "text")  # text or json

# Endpoints
AUTH_PATH = "/api/User/Authentication"
CREATE_PATH = "/api/Story/Create"
EDIT_PATH = "/api/Story/Edit/{story_id}"
ALL_PATH = "/api/Story/All"
DELETE_PATH = "/api/Story/Delete/{story_id}"

# Messages returned by the service
MSG_CREATED = "Successfully created!"
MSG_EDITED = "Successfully edited"
MSG_DELETED = "Deleted successfully!"
MSG_NOT_FOUND_FRAGMENT = "No spoilers"
MSG_DELETE_FAILED_FRAGMENT = "Unable to delete this story spoiler"
