"""Search SkillsMP for AI skills and print a compact JSON summary.

One query, one page, one request: the verbose API response is reduced to
the fields an AI assistant needs to pick a skill.
"""

__version__ = "0.1.0"

from .cli import main
from .client import SkillsMPClient
from .decode import decode
from .models import AiOutput, AiSkill, ApiResponse, SearchQuery
from .project import project, render
from .request import build_request

__all__ = [
    "main",
    "SkillsMPClient",
    "decode",
    "AiOutput",
    "AiSkill",
    "ApiResponse",
    "SearchQuery",
    "project",
    "render",
    "build_request",
]

if __name__ == "__main__":
    main()
