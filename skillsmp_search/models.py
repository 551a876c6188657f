"""Data models for the search request, the API response and the printed output."""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field, NonNegativeInt

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1
DEFAULT_SORT = "recent"
SORT_MODES = ("recent", "stars")

# Every field is checked against its JSON type as-is: "42" is not a number,
# 1 is not a bool. Unknown fields are ignored.
_WIRE_CONFIG = {"populate_by_name": True, "strict": True}


@dataclass(frozen=True)
class SearchQuery:
    """One search invocation, as given on the command line."""

    query: str
    api_key: str
    limit: int = DEFAULT_LIMIT
    page: int = DEFAULT_PAGE
    sort: str = DEFAULT_SORT


class ApiError(BaseModel):
    """Error details sent alongside ``success: false``."""

    code: str | None = None
    message: str | None = None

    model_config = _WIRE_CONFIG


class Skill(BaseModel):
    """A single skill as returned by the search endpoint."""

    id: str
    name: str
    author: str
    description: str | None = None
    github_url: str | None = Field(default=None, alias="githubUrl")
    skill_url: str | None = Field(default=None, alias="skillUrl")
    stars: NonNegativeInt | None = None

    model_config = _WIRE_CONFIG


class Pagination(BaseModel):
    """Position of the returned page within the full result set."""

    page: NonNegativeInt
    limit: NonNegativeInt
    total: NonNegativeInt
    total_pages: NonNegativeInt = Field(alias="totalPages")
    has_next: bool = Field(alias="hasNext")
    has_prev: bool = Field(alias="hasPrev")

    model_config = _WIRE_CONFIG


class ResponseData(BaseModel):
    skills: list[Skill]
    pagination: Pagination

    model_config = _WIRE_CONFIG


class ApiResponse(BaseModel):
    """Top-level envelope of every search response.

    Either ``data`` or ``error`` is populated depending on ``success``, but
    the server does not guarantee it, so all three are optional.
    """

    success: bool | None = None
    data: ResponseData | None = None
    error: ApiError | None = None

    model_config = _WIRE_CONFIG


@dataclass
class AiSkill:
    name: str
    author: str
    description: str = ""
    stars: int = 0
    url: str = ""


@dataclass
class AiOutput:
    """Minimal search result printed for AI consumers."""

    query: str
    total_results: int
    page: int
    skills: list[AiSkill] = field(default_factory=list)
